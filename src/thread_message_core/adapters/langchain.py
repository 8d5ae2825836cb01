"""LangChain message adapter.

Converts LangChain messages (HumanMessage, AIMessage, SystemMessage, etc.)
to MessageQuery values.
"""

import logging
from typing import TYPE_CHECKING, Any

from thread_message_core.models.parts import (
    ContentPart,
    image_file_part,
    image_url_part,
    text_part,
)
from thread_message_core.models.query import MessageQuery, Role

if TYPE_CHECKING:
    from langchain_core.messages import BaseMessage

logger = logging.getLogger(__name__)


class LangChainAdapter:
    """Converts LangChain messages to MessageQuery.

    String content stays a plain string. List content (multimodal messages)
    becomes an array of parts in the original block order.

    Usage:
        ```python
        from langchain_core.messages import HumanMessage
        from thread_message_core.adapters.langchain import LangChainAdapter

        adapter = LangChainAdapter()
        query = adapter.convert_single(HumanMessage(content="Describe this"))
        ```
    """

    def convert(self, messages: list["BaseMessage"]) -> list[MessageQuery]:
        """Convert a list of LangChain messages.

        Args:
            messages: List of LangChain BaseMessage objects.

        Returns:
            List of MessageQuery objects.
        """
        return [self.convert_single(msg) for msg in messages]

    def convert_single(self, message: "BaseMessage") -> MessageQuery:
        """Convert a single LangChain message.

        Args:
            message: A LangChain BaseMessage object.

        Returns:
            MessageQuery object.
        """
        role = self._role(message)

        if isinstance(message.content, str):
            return MessageQuery.from_text(role, message.content)

        parts = [
            part
            for block in message.content
            if (part := self._convert_block(block)) is not None
        ]
        return MessageQuery.from_parts(role, parts)

    def _role(self, message: "BaseMessage") -> Role:
        from langchain_core.messages import (
            AIMessage,
            HumanMessage,
            SystemMessage,
            ToolMessage,
        )

        if isinstance(message, HumanMessage):
            return "user"
        elif isinstance(message, AIMessage):
            return "assistant"
        elif isinstance(message, SystemMessage):
            return "system"
        elif isinstance(message, ToolMessage):
            return "tool"
        else:
            return "user"

    def _convert_block(self, block: str | dict[str, Any]) -> ContentPart | None:
        """Convert one content block, or None if it has no thread equivalent.

        Handles both the OpenAI-style blocks (``text``, ``image_url``,
        ``image_file``) and LangChain's standard ``image`` block when it
        carries a URL or a file ID.

        Image blocks missing their URL or file ID are skipped like any other
        unsupported block.
        """
        if isinstance(block, str):
            return text_part(block)

        block_type = block.get("type")
        if block_type == "text":
            return text_part(block.get("text", ""))
        elif block_type == "image_url":
            image_url = block.get("image_url")
            url = image_url.get("url") if isinstance(image_url, dict) else image_url
            if isinstance(url, str):
                return image_url_part(url)
        elif block_type == "image_file":
            image_file = block.get("image_file")
            if isinstance(image_file, dict) and isinstance(
                image_file.get("file_id"), str
            ):
                return image_file_part(image_file["file_id"])
        elif block_type == "image" and block.get("url"):
            return image_url_part(block["url"])
        elif block_type == "image" and block.get("file_id"):
            return image_file_part(block["file_id"])

        logger.debug(
            "skipping unsupported or malformed content block type=%r", block_type
        )
        return None

"""OpenAI thread message adapter.

Converts messages already stored in an OpenAI thread back into MessageQuery
values, e.g. to copy a conversation into a new thread.
"""

import logging
from typing import TYPE_CHECKING

from thread_message_core.models.parts import (
    ContentPart,
    image_file_part,
    image_url_part,
    text_part,
)
from thread_message_core.models.query import MessageQuery

if TYPE_CHECKING:
    from openai.types.beta.threads import Message, MessageContent

logger = logging.getLogger(__name__)


class OpenAIThreadAdapter:
    """Converts ``openai.types.beta.threads.Message`` objects to MessageQuery.

    A message holding a single text block collapses to plain string content,
    the same shape ``MessageQuery.from_text`` produces. Anything else keeps
    its block order as an array of parts. Blocks with no request-side
    equivalent (e.g. refusals) are dropped.
    """

    def convert(self, messages: list["Message"]) -> list[MessageQuery]:
        """Convert a list of thread messages."""
        return [self.convert_single(msg) for msg in messages]

    def convert_single(self, message: "Message") -> MessageQuery:
        """Convert a single thread message."""
        parts = [
            part
            for block in message.content
            if (part := self._convert_block(block)) is not None
        ]

        if len(parts) == 1 and parts[0].type == "text":
            return MessageQuery.from_text(message.role, parts[0].text)
        return MessageQuery.from_parts(message.role, parts)

    def _convert_block(self, block: "MessageContent") -> ContentPart | None:
        if block.type == "text":
            return text_part(block.text.value)
        elif block.type == "image_file":
            return image_file_part(block.image_file.file_id)
        elif block.type == "image_url":
            return image_url_part(block.image_url.url)

        logger.debug("skipping unsupported content block type=%r", block.type)
        return None

import logging
from collections.abc import Iterable, Sequence
from typing import Literal

from pydantic import BaseModel, ConfigDict

from thread_message_core.models.content import Content
from thread_message_core.models.parts import (
    ContentPart,
    image_file_part,
    text_part,
)

logger = logging.getLogger(__name__)

Role = Literal["system", "developer", "user", "assistant", "tool"]


class MessageQuery(BaseModel):
    """A message to add to a thread: a role and its content.

    Build instances with ``from_text`` or ``from_parts``. Serializes to an
    object with exactly the ``role`` and ``content`` keys.

    Attributes:
        role: Chat role, carried as its wire value.
        content: The message content, a string or a list of parts.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: Content

    @classmethod
    def from_text(
        cls,
        role: Role,
        text: str,
        file_ids: Sequence[str] | None = None,
    ) -> "MessageQuery":
        """Create a query from text with optional image attachments.

        Without attachments the content stays a plain string. With
        attachments it becomes an array holding the text part first, then
        one image_file part per ID in the given order.

        Args:
            role: Chat role of the message.
            text: Message text.
            file_ids: Uploaded file IDs to attach as images.

        Returns:
            The constructed MessageQuery.

        Raises:
            TypeError: file_ids is a single string rather than a sequence.
        """
        if isinstance(file_ids, str):
            raise TypeError(
                f"file_ids must be a sequence of file IDs, not a string: {file_ids!r}"
            )

        if file_ids:
            parts: list[ContentPart] = [text_part(text)]
            parts.extend(image_file_part(file_id) for file_id in file_ids)
            content = Content.content_array(parts)
        else:
            content = Content.string(text)

        logger.debug(
            "from_text role=%s attachments=%d", role, len(file_ids or ())
        )
        return cls(role=role, content=content)

    @classmethod
    def from_parts(cls, role: Role, parts: Iterable[ContentPart]) -> "MessageQuery":
        """Create a query whose content is exactly the given parts, in order."""
        content = Content.content_array(parts)
        logger.debug("from_parts role=%s parts=%d", role, len(content.parts))
        return cls(role=role, content=content)

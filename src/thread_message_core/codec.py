"""Wire codec for thread message content.

Encoding produces plain JSON-compatible values (``str``, ``list``, ``dict``)
ready to be handed to an HTTP client. Decoding accepts the same values, as
produced by ``json.loads``, and raises ``ContentDecodeError`` subclasses on
any malformed input.

Usage:
    ```python
    from thread_message_core import MessageQuery, dumps_message, loads_message

    query = MessageQuery.from_text("user", "describe", file_ids=["file-1"])
    payload = dumps_message(query)
    assert loads_message(payload) == query
    ```
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from thread_message_core.config import ThreadMessageConfig
from thread_message_core.errors import ContentDecodeError
from thread_message_core.models.content import Content, decode_content_value
from thread_message_core.models.parts import ContentPart, decode_content_part
from thread_message_core.models.query import MessageQuery

logger = logging.getLogger(__name__)


def encode_content_part(part: ContentPart) -> dict[str, Any]:
    """Encode a content part as ``{"type": ..., <payload key>: ...}``."""
    return part.model_dump(mode="json")


def encode_content(content: Content) -> str | list[dict[str, Any]]:
    """Encode content as a bare string or an array of encoded parts."""
    return content.model_dump(mode="json")


def encode_message(query: MessageQuery) -> dict[str, Any]:
    """Encode a query as ``{"role": ..., "content": ...}``."""
    return query.model_dump(mode="json")


def decode_content(data: Any) -> Content:
    """Decode a content field value.

    Raises:
        MalformedContentError: The value is neither a string nor an array
            of content parts.
    """
    content = Content(decode_content_value(data))
    logger.debug(
        "decode_content kind=%s parts=%d",
        "string" if content.is_string else "content_array",
        len(content.parts),
    )
    return content


def decode_message(data: Any) -> MessageQuery:
    """Decode a query object.

    Keys other than ``role`` and ``content`` are ignored.

    Raises:
        ContentDecodeError: The object, its role or its content is invalid.
    """
    if not isinstance(data, Mapping):
        raise ContentDecodeError(
            f"MessageQuery must be an object, got {type(data).__name__}"
        )
    if "content" not in data:
        raise ContentDecodeError("MessageQuery requires a 'content' key")

    content = decode_content(data["content"])
    try:
        return MessageQuery(role=data.get("role"), content=content)
    except ValidationError as exc:
        logger.debug("decode_message invalid role=%r", data.get("role"))
        raise ContentDecodeError(
            f"Invalid MessageQuery role: {data.get('role')!r}"
        ) from exc


def _dumps(value: Any, config: ThreadMessageConfig | None) -> str:
    if config is None:
        return json.dumps(value, ensure_ascii=False)
    return json.dumps(
        value, indent=config.json_indent, ensure_ascii=config.ensure_ascii
    )


def _loads(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ContentDecodeError(f"Invalid JSON: {exc}") from exc


def dumps_content(content: Content, config: ThreadMessageConfig | None = None) -> str:
    """Encode content to JSON text."""
    return _dumps(encode_content(content), config)


def loads_content(text: str | bytes) -> Content:
    """Decode content from JSON text."""
    return decode_content(_loads(text))


def dumps_message(
    query: MessageQuery, config: ThreadMessageConfig | None = None
) -> str:
    """Encode a query to JSON text.

    Without a config the output is compact and keeps non-ASCII text as-is.
    """
    return _dumps(encode_message(query), config)


def loads_message(text: str | bytes) -> MessageQuery:
    """Decode a query from JSON text."""
    return decode_message(_loads(text))


__all__ = [
    "decode_content",
    "decode_content_part",
    "decode_message",
    "dumps_content",
    "dumps_message",
    "encode_content",
    "encode_content_part",
    "encode_message",
    "loads_content",
    "loads_message",
]

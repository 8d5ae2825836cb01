"""Message content model and wire codec for OpenAI thread messages.

The ``content`` of a message added to a thread is either a bare string or
an array of typed parts (text, image by file ID, image by URL).

Usage:
    ```python
    from thread_message_core import MessageQuery, encode_message

    query = MessageQuery.from_text("user", "describe", file_ids=["f1", "f2"])
    encode_message(query)
    # {"role": "user", "content": [
    #     {"type": "text", "text": "describe"},
    #     {"type": "image_file", "image_file": {"file_id": "f1"}},
    #     {"type": "image_file", "image_file": {"file_id": "f2"}},
    # ]}
    ```
"""

from thread_message_core.codec import (
    decode_content,
    decode_content_part,
    decode_message,
    dumps_content,
    dumps_message,
    encode_content,
    encode_content_part,
    encode_message,
    loads_content,
    loads_message,
)
from thread_message_core.config import ThreadMessageConfig
from thread_message_core.errors import (
    ContentDecodeError,
    MalformedContentError,
    MissingPartPayloadError,
    UnknownPartTypeError,
)
from thread_message_core.models import (
    Content,
    ContentPart,
    ImageFile,
    ImageFilePart,
    ImageURL,
    ImageURLPart,
    MessageQuery,
    Role,
    TextPart,
    image_file_part,
    image_url_part,
    text_part,
)

__all__ = [
    # Models
    "MessageQuery",
    "Role",
    "Content",
    "ContentPart",
    "TextPart",
    "ImageFilePart",
    "ImageFile",
    "ImageURLPart",
    "ImageURL",
    "text_part",
    "image_file_part",
    "image_url_part",
    # Codec
    "encode_content_part",
    "decode_content_part",
    "encode_content",
    "decode_content",
    "encode_message",
    "decode_message",
    "dumps_content",
    "loads_content",
    "dumps_message",
    "loads_message",
    # Config
    "ThreadMessageConfig",
    # Errors
    "ContentDecodeError",
    "MalformedContentError",
    "UnknownPartTypeError",
    "MissingPartPayloadError",
]

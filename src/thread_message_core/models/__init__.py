from thread_message_core.models.content import Content
from thread_message_core.models.parts import (
    ContentPart,
    ImageFile,
    ImageFilePart,
    ImageURL,
    ImageURLPart,
    TextPart,
    image_file_part,
    image_url_part,
    text_part,
)
from thread_message_core.models.query import MessageQuery, Role

__all__ = [
    "Content",
    "ContentPart",
    "ImageFile",
    "ImageFilePart",
    "ImageURL",
    "ImageURLPart",
    "MessageQuery",
    "Role",
    "TextPart",
    "image_file_part",
    "image_url_part",
    "text_part",
]

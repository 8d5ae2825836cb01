"""Content part variants for thread messages.

A content part is one of three variants distinguished on the wire by its
``type`` key. Each variant carries exactly one payload key next to ``type``:

    {"type": "text", "text": "..."}
    {"type": "image_file", "image_file": {"file_id": "..."}}
    {"type": "image_url", "image_url": {"url": "..."}}
"""

from collections.abc import Mapping
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from thread_message_core.errors import MissingPartPayloadError, UnknownPartTypeError


class TextPart(BaseModel):
    """A text snippet."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


class ImageFile(BaseModel):
    """Reference to an uploaded file."""

    model_config = ConfigDict(frozen=True)

    file_id: str


class ImageFilePart(BaseModel):
    """An image attached by uploaded file ID."""

    model_config = ConfigDict(frozen=True)

    type: Literal["image_file"] = "image_file"
    image_file: ImageFile

    @property
    def file_id(self) -> str:
        return self.image_file.file_id


class ImageURL(BaseModel):
    """Reference to an external image."""

    model_config = ConfigDict(frozen=True)

    url: str


class ImageURLPart(BaseModel):
    """An image attached by URL."""

    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"
    image_url: ImageURL

    @property
    def url(self) -> str:
        return self.image_url.url


ContentPart = Union[TextPart, ImageFilePart, ImageURLPart]

_PART_TYPES = (TextPart, ImageFilePart, ImageURLPart)


def text_part(text: str) -> TextPart:
    """Create a text part."""
    return TextPart(text=text)


def image_file_part(file_id: str) -> ImageFilePart:
    """Create an image part referencing an uploaded file."""
    return ImageFilePart(image_file=ImageFile(file_id=file_id))


def image_url_part(url: str) -> ImageURLPart:
    """Create an image part referencing a URL."""
    return ImageURLPart(image_url=ImageURL(url=url))


def _validate_payload(
    model: type[BaseModel], part_type: str, data: Mapping[str, Any], key: str
) -> Any:
    """Validate ``key`` of ``data`` as the payload of ``model``.

    Only ``type`` and ``key`` are handed to the model, so keys belonging to
    other variants are never looked at.
    """
    if key not in data:
        raise MissingPartPayloadError(part_type, key, "key is missing")
    try:
        return model.model_validate({"type": part_type, key: data[key]})
    except ValidationError as exc:
        raise MissingPartPayloadError(
            part_type, key, exc.errors()[0]["msg"]
        ) from exc


def decode_content_part(data: Any) -> ContentPart:
    """Decode a single content part from its wire representation.

    The ``type`` discriminator is read first and selects the variant; only
    that variant's payload key is then decoded. Already-built parts are
    returned unchanged.

    Args:
        data: A mapping as produced by ``json.loads``, or a part instance.

    Returns:
        The decoded TextPart, ImageFilePart or ImageURLPart.

    Raises:
        UnknownPartTypeError: ``type`` is missing or not a known variant.
        MissingPartPayloadError: The variant's payload is absent or malformed.
    """
    if isinstance(data, _PART_TYPES):
        return data
    if not isinstance(data, Mapping):
        raise UnknownPartTypeError(None)

    part_type = data.get("type")
    if part_type == "text":
        return _validate_payload(TextPart, part_type, data, "text")
    elif part_type == "image_file":
        return _validate_payload(ImageFilePart, part_type, data, "image_file")
    elif part_type == "image_url":
        return _validate_payload(ImageURLPart, part_type, data, "image_url")
    else:
        raise UnknownPartTypeError(part_type)

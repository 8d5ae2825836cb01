"""Decode failures raised by the content codec."""

from typing import Any


class ContentDecodeError(ValueError):
    """A wire value could not be decoded into a message, content or part."""


class MalformedContentError(ContentDecodeError):
    """The value is neither a string nor an array of content parts."""


class UnknownPartTypeError(ContentDecodeError):
    """A content part's ``type`` discriminator is missing or not recognised."""

    def __init__(self, part_type: Any) -> None:
        self.part_type = part_type
        super().__init__(f"Unknown content part type: {part_type!r}")


class MissingPartPayloadError(ContentDecodeError):
    """A known content part is missing its payload key or has the wrong shape."""

    def __init__(self, part_type: str, key: str, detail: str | None = None) -> None:
        self.part_type = part_type
        self.key = key
        message = f"Content part {part_type!r} requires a valid {key!r} key"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

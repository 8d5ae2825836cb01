"""Message content: a bare string or an ordered array of content parts."""

from collections.abc import Iterable
from typing import Any

from pydantic import ConfigDict, RootModel, field_validator

from thread_message_core.errors import ContentDecodeError, MalformedContentError
from thread_message_core.models.parts import ContentPart, decode_content_part

CONTENT_SHAPE_ERROR = "Content must be either a string or an array of content parts"


def decode_content_value(data: Any) -> str | tuple[ContentPart, ...]:
    """Decode the raw value of a content field.

    The wire format has no outer tag, so the two shapes are tried in order:
    a plain string first, then an array of content parts. The shapes are
    disjoint (a JSON string is never an array), so the order only decides
    which attempt short-circuits.

    Raises:
        MalformedContentError: Neither shape matched. When the value was an
            array whose elements failed to decode, the element error is
            chained as ``__cause__``.
    """
    if isinstance(data, Content):
        return data.root

    if isinstance(data, str):
        return data

    if isinstance(data, (list, tuple)):
        parts: list[ContentPart] = []
        for index, item in enumerate(data):
            try:
                parts.append(decode_content_part(item))
            except ContentDecodeError as exc:
                raise MalformedContentError(
                    f"{CONTENT_SHAPE_ERROR} (element {index}: {exc})"
                ) from exc
        return tuple(parts)

    raise MalformedContentError(
        f"{CONTENT_SHAPE_ERROR}, got {type(data).__name__}"
    )


class Content(RootModel[str | tuple[ContentPart, ...]]):
    """The content of a thread message.

    Exactly one case is active: ``string`` (a single scalar) or
    ``content_array`` (zero or more parts in presentation order).
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root", mode="before")
    @classmethod
    def _decode_root(cls, value: Any) -> Any:
        return decode_content_value(value)

    @classmethod
    def string(cls, text: str) -> "Content":
        """Build the scalar case."""
        return cls(text)

    @classmethod
    def content_array(cls, parts: Iterable[ContentPart]) -> "Content":
        """Build the array case, keeping the parts in the given order."""
        return cls(tuple(parts))

    @property
    def is_string(self) -> bool:
        return isinstance(self.root, str)

    @property
    def text(self) -> str | None:
        """The scalar value, or None for the array case."""
        return self.root if isinstance(self.root, str) else None

    @property
    def parts(self) -> tuple[ContentPart, ...]:
        """The content parts, or an empty tuple for the string case."""
        return () if isinstance(self.root, str) else self.root

    def __str__(self) -> str:
        if isinstance(self.root, str):
            preview = self.root[:60] + "..." if len(self.root) > 60 else self.root
            return f"Content({preview!r})"
        kinds = ", ".join(part.type for part in self.root)
        return f"Content([{kinds}])"

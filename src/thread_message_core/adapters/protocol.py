from typing import Any, Protocol, runtime_checkable

from thread_message_core.models.query import MessageQuery


@runtime_checkable
class MessageAdapter(Protocol):
    """Turns messages from another framework into MessageQuery values.

    Blocks with no thread-message equivalent are dropped rather than
    raising.
    """

    def convert(self, messages: list[Any]) -> list[MessageQuery]:
        """Convert messages in order, one query per message."""
        ...

    def convert_single(self, message: Any) -> MessageQuery:
        """Convert one message."""
        ...

"""Tests for the adapter registry and protocol."""

import pytest

from thread_message_core.adapters import (
    LangChainAdapter,
    MessageAdapter,
    OpenAIThreadAdapter,
    get_adapter,
)
from thread_message_core.models import MessageQuery


class EchoAdapter:
    """Minimal custom adapter: each message is plain user text."""

    def convert(self, messages: list[str]) -> list[MessageQuery]:
        return [self.convert_single(msg) for msg in messages]

    def convert_single(self, message: str) -> MessageQuery:
        return MessageQuery.from_text("user", message)


class TestMessageAdapterProtocol:
    """Test that adapters satisfy MessageAdapter."""

    @pytest.mark.parametrize("adapter_cls", [LangChainAdapter, OpenAIThreadAdapter])
    def test_builtin_adapters_conform(self, adapter_cls) -> None:
        """Both shipped adapters implement the protocol."""
        assert isinstance(adapter_cls(), MessageAdapter)

    def test_custom_adapter_conforms(self) -> None:
        """Any object with convert and convert_single conforms."""
        assert isinstance(EchoAdapter(), MessageAdapter)

    def test_object_without_methods_does_not_conform(self) -> None:
        """Objects lacking the methods are not adapters."""
        assert not isinstance(object(), MessageAdapter)


class TestGetAdapter:
    """Tests for get_adapter() resolution."""

    def test_langchain_string_returns_langchain_adapter(self) -> None:
        """String "langchain" resolves to a LangChainAdapter instance."""
        assert isinstance(get_adapter("langchain"), LangChainAdapter)

    def test_openai_string_returns_openai_adapter(self) -> None:
        """String "openai" resolves to an OpenAIThreadAdapter instance."""
        assert isinstance(get_adapter("openai"), OpenAIThreadAdapter)

    def test_unknown_string_raises_value_error(self) -> None:
        """Unknown adapter string raises ValueError with available options."""
        with pytest.raises(ValueError, match="Unknown adapter 'unknown'"):
            get_adapter("unknown")

    def test_custom_instance_passes_through(self) -> None:
        """A conforming instance is returned as-is and usable."""
        custom = EchoAdapter()

        result = get_adapter(custom)

        assert result is custom
        assert result.convert(["hi"]) == [MessageQuery.from_text("user", "hi")]

    def test_non_conforming_instance_raises_type_error(self) -> None:
        """Objects that do not implement the protocol are rejected."""
        with pytest.raises(TypeError, match="does not implement MessageAdapter"):
            get_adapter(42)

"""Adapters for converting framework-specific messages to MessageQuery.

Available adapters:
    - "langchain": LangChainAdapter, for LangChain messages (HumanMessage, etc.)
    - "openai": OpenAIThreadAdapter, for messages read back from an OpenAI thread

Usage:
    ```python
    from thread_message_core.adapters import get_adapter
    from langchain_core.messages import HumanMessage

    adapter = get_adapter("langchain")
    queries = adapter.convert([
        HumanMessage(content=[
            {"type": "text", "text": "What is in this picture?"},
            {"type": "image_url", "image_url": {"url": "https://example.com/cat.png"}},
        ]),
    ])
    ```
"""

from thread_message_core.adapters.langchain import LangChainAdapter
from thread_message_core.adapters.openai import OpenAIThreadAdapter
from thread_message_core.adapters.protocol import MessageAdapter

ADAPTER_REGISTRY: dict[str, type[MessageAdapter]] = {
    "langchain": LangChainAdapter,
    "openai": OpenAIThreadAdapter,
}


def get_adapter(adapter: str | MessageAdapter) -> MessageAdapter:
    """Resolve an adapter by name or pass through an instance.

    Args:
        adapter: A key from ADAPTER_REGISTRY ("langchain", "openai") or an
            object implementing MessageAdapter.

    Returns:
        An adapter instance.

    Raises:
        ValueError: If a string key is not found in the registry.
        TypeError: If an instance does not implement MessageAdapter.
    """
    if isinstance(adapter, str):
        if adapter not in ADAPTER_REGISTRY:
            raise ValueError(
                f"Unknown adapter {adapter!r}. Available: {list(ADAPTER_REGISTRY)}"
            )
        return ADAPTER_REGISTRY[adapter]()
    if not isinstance(adapter, MessageAdapter):
        raise TypeError(f"{type(adapter).__name__} does not implement MessageAdapter")
    return adapter


__all__ = [
    "ADAPTER_REGISTRY",
    "LangChainAdapter",
    "MessageAdapter",
    "OpenAIThreadAdapter",
    "get_adapter",
]

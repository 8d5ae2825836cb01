import pytest

from thread_message_core.models import (
    ContentPart,
    image_file_part,
    image_url_part,
    text_part,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep THREADMSG_* variables and stray .env files out of every test."""
    for var in ("DEFAULT_ROLE", "JSON_INDENT", "ENSURE_ASCII", "DEBUG"):
        monkeypatch.delenv(f"THREADMSG_{var}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mixed_parts() -> list[ContentPart]:
    """Provide one part of each variant."""
    return [
        text_part("What is in these images?"),
        image_file_part("file-abc123"),
        image_url_part("https://example.com/cat.png"),
    ]


@pytest.fixture
def mixed_parts_wire() -> list[dict]:
    """Wire form of ``mixed_parts``."""
    return [
        {"type": "text", "text": "What is in these images?"},
        {"type": "image_file", "image_file": {"file_id": "file-abc123"}},
        {"type": "image_url", "image_url": {"url": "https://example.com/cat.png"}},
    ]

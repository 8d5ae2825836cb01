from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from thread_message_core.models.query import Role


class ThreadMessageConfig(BaseSettings):
    """Configuration for thread message encoding.

    Settings can be provided via environment variables with THREADMSG_ prefix.
    None of them change the wire shape of an encoded message.
    """

    model_config = SettingsConfigDict(
        env_prefix="THREADMSG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Role used by the CLI when none is given
    default_role: Role = "user"

    # JSON text output (None = compact single line)
    json_indent: int | None = Field(default=None, ge=0)
    ensure_ascii: bool = False

    # CLI log level (DEBUG when set)
    debug: bool = False

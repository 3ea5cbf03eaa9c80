"""Configuration management for Chatterbox."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.dates import DISPLAY_FORMAT
from .core.responses import BOT_NAME

logger = logging.getLogger(__name__)

CHATTERBOX_HOME = Path(os.environ.get("CHATTERBOX_HOME", Path.home() / "chatterbox"))
CONFIG_FILE = CHATTERBOX_HOME / "config" / "chatterbox.conf"
DATA_DIR = CHATTERBOX_HOME / "data"


@dataclass
class Config:
    """Chatterbox configuration."""

    data_file: str = ""
    bot_name: str = BOT_NAME
    date_display_format: str = DISPLAY_FORMAT
    log_level: str = "WARNING"
    # Telegram front-end settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)

    @property
    def data_path(self) -> Path:
        """Task file location; defaults to DATA_DIR/tasks.txt."""
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_DIR / "tasks.txt"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_user_ids(value: str) -> list[int]:
    users = []
    for raw in value.split(","):
        raw = raw.strip()
        if not raw:
            continue
        try:
            users.append(int(raw))
        except ValueError:
            logger.warning(f"Ignoring invalid TELEGRAM_ALLOWED_USERS entry: {raw!r}")
    return users


def load_config(path: Path | None = None) -> Config:
    """Load configuration from chatterbox.conf (KEY=value lines)."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "bot_name":
                config.bot_name = value
            case "date_display_format":
                config.date_display_format = value
            case "log_level":
                config.log_level = value.upper()
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                config.telegram_allowed_users = _parse_user_ids(value)
            case _:
                logger.debug(f"Ignoring unknown config key: {key}")

    return config

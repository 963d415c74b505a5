"""Settings for sc-parser"""

from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from sc_parser.utils.enum import HexPrefixPolicy
from sc_parser.utils.types import UpperCase


class Config(BaseSettings):
    # The trailing `_` is required in the env_prefix, otherwise pydantic would
    # look for `SC_PARSERLOG_DIR` instead of `SC_PARSER_LOG_DIR`
    model_config = SettingsConfigDict(env_prefix="SC_PARSER_", env_ignore_empty=True)

    # Logging configuration
    log_dir: Path | None = None
    log_level: UpperCase = "INFO"
    log_retention_days: int = 10

    # Characters of raw sc output echoed into audit log lines
    max_logged_output: int = 200

    # Parsing behaviour for hexadecimal numeric fields (TYPE, START_TYPE, STATE, ...)
    hex_prefix_policy: HexPrefixPolicy = HexPrefixPolicy.ALWAYS

    @property
    def effective_log_dir(self) -> Path:
        """Return the log directory, using ~/.local/share/sc-parser/logs if not configured."""
        return self.log_dir or Path.home() / ".local" / "share" / "sc-parser" / "logs"


CONFIG = Config()

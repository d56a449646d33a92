"""
Snippetbox: Application Configuration
========================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables, validates values,
       and the CLI overrides the listen address with its -addr flag.
Who:   Built once by the CLI (or by create_app() when none is passed) and
       handed down explicitly; there is no module-level settings singleton.
When:  Process start.

Environment variables (case-insensitive, no prefix):
    ADDR            Listen address, e.g. ":4000" or "127.0.0.1:8080"
    UI_DIR          Directory holding html/ and static/
    LOG_LEVEL       DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_FORMAT      text (key=value lines) or json
    LOG_ADD_SOURCE  Append source=file:line to every log line
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Templates and static assets ship inside the package
DEFAULT_UI_DIR = Path(__file__).resolve().parent / "ui"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development, so a bare
    `snippetbox` invocation serves on :4000 with text logs at INFO.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # Same syntax as the -addr flag: "[host]:port"; empty host = all interfaces
    addr: str = Field(default=":4000", description="HTTP network address")

    # ── UI ────────────────────────────────────────────────────────────────
    ui_dir: Path = Field(default=DEFAULT_UI_DIR)

    @property
    def templates_dir(self) -> Path:
        return self.ui_dir / "html"

    @property
    def static_dir(self) -> Path:
        return self.ui_dir / "static"

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text")
    log_add_source: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in {"text", "json"}:
            raise ValueError(f"Invalid log_format '{v}'. Must be 'text' or 'json'")
        return lower

    model_config = SettingsConfigDict(case_sensitive=False)

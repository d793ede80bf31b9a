"""Environment-backed settings primitives for :mod:`claim_verify`."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["ClaimVerifySettings", "get_settings"]

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class ClaimVerifySettings(BaseSettings):
    """Expose environment-derived configuration knobs for the verifier.

    Only operational concerns live here. Field lengths and the declaration
    text are protocol constants and are deliberately absent.

    Attributes:
        log_level: Logging verbosity for the ``claim_verify`` logger. Accepts
            level names (``"INFO"``) or numeric levels; malformed values fall
            back to ``WARNING``.
        log_json: Emit structured JSON logs on stderr when ``True``. Values
            other than 1, true, yes or on (any case) leave it off.
        trace_id: Optional static trace identifier attached to log records.
    """

    log_level: int = Field(default=logging.WARNING, alias="CLAIM_VERIFY_LOG_LEVEL")
    log_json: bool = Field(default=False, alias="CLAIM_VERIFY_LOG_JSON")
    trace_id: str | None = Field(default=None, alias="CLAIM_VERIFY_TRACE_ID")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, value: object) -> int:
        """Parse a logging level while tolerating malformed input.

        Args:
            value: Raw environment value.

        Returns:
            Numeric logging level, ``logging.WARNING`` when unparseable.
        """

        if isinstance(value, bool):
            return logging.WARNING
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return int(text)
            level = logging.getLevelName(text.upper())
            if isinstance(level, int):
                return level
        return logging.WARNING

    @field_validator("log_json", mode="before")
    @classmethod
    def _parse_log_json(cls, value: object) -> bool:
        """Parse the JSON logging switch, treating unknown values as ``False``."""

        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value == 1
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return False

    @field_validator("trace_id", mode="before")
    @classmethod
    def _blank_trace_id(cls, value: object) -> str | None:
        """Treat an empty trace identifier as unset."""

        if value in (None, ""):
            return None
        return str(value)


def get_settings() -> ClaimVerifySettings:
    """Return a :class:`ClaimVerifySettings` instance.

    Returns:
        Settings parsed from environment variables.
    """

    return ClaimVerifySettings()

"""
Module: config.py
Description:
    Plugin configuration as handed over by the host application, plus fail-fast validation.

Usage:
    Imported by other modules; not intended to be executed directly.

Notes:
    The CLI builds the mapping from `.env` (see `utils/env.py`).
"""

import re
from dataclasses import dataclass

from collector.errors import CollectError, ErrorKind

TOKEN_PATTERN = re.compile(r"[a-f0-9]{64}", re.IGNORECASE)


@dataclass(frozen=True)
class Config:
    api_token: str
    word_list_title: str
    enable_word_check: str = "enable"

    @classmethod
    def from_mapping(cls, mapping: dict) -> "Config":
        return cls(
            api_token=mapping.get("api_token") or "",
            word_list_title=mapping.get("word_list_title") or "",
            enable_word_check=mapping.get("enable_word_check") or "enable",
        )

    @property
    def word_check_enabled(self) -> bool:
        return self.enable_word_check == "enable"


def validate_token(api_token: str) -> None:
    if not TOKEN_PATTERN.fullmatch(api_token or ""):
        raise CollectError(
            ErrorKind.CONFIGURATION,
            "invalid API token format, expected a 64-character hex string",
        )


def validate_config(config: Config) -> None:
    """Reject a config that can never work, before any request is made."""
    if not config.api_token or not config.word_list_title:
        raise CollectError(
            ErrorKind.CONFIGURATION, "API token and word list title are required"
        )

    validate_token(config.api_token)

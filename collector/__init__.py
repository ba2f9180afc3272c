"""
Module: __init__.py
Description:
    MaiMemo collection plugin: adds looked-up words to a MaiMemo cloud notepad.

Usage:
    from collector import collect
"""

from collector.config import Config, validate_config, validate_token
from collector.errors import CollectError, ErrorKind
from collector.http_client import FetchResponse, RequestsHttp
from collector.main import collect

__all__ = [
    "CollectError",
    "Config",
    "ErrorKind",
    "FetchResponse",
    "RequestsHttp",
    "collect",
    "validate_config",
    "validate_token",
]

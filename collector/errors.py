"""
Module: errors.py
Description:
    Tagged error type raised by every collector operation.

Usage:
    Imported by other modules; not intended to be executed directly.
"""

from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    DATA_SHAPE = "data-shape"
    BUSINESS_RULE = "business-rule"


class CollectError(Exception):
    """
    A failed collection step.
    The message always starts with the operation that failed, so it can be shown to the user as-is.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def wrap(self, prefix: str) -> "CollectError":
        return CollectError(self.kind, f"{prefix}: {self.message}")

    def __str__(self):
        return self.message

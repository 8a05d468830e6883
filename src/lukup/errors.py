"""
Error taxonomy for the Lukup SDK.

Local failures (bad arguments, encoding overflow, wallet construction) never
reach the network.  Anything the chain or transport rejects surfaces as
RemoteCallFailed carrying the underlying message verbatim.
"""

from __future__ import annotations


class LukupError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(LukupError, ValueError):
    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class EncodingOverflow(LukupError, ValueError):
    pass


class InvalidMnemonic(LukupError, ValueError):
    pass


class UnsupportedAccount(LukupError, TypeError):
    pass


class ConfigError(LukupError):
    pass


class RemoteCallFailed(LukupError):
    """A contract call was rejected by the node, the network or the chain."""

    def __init__(self, function: str, message: str) -> None:
        super().__init__(f"{function} failed: {message}")
        self.function = function
        self.message = message

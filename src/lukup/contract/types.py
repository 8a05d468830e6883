"""
Argument validation and sanitisation for contract calls.

validate_input rejects values whose shape does not match their declared
DataType before anything reaches the network.  sanitise_input converts short
text into the fixed-width bytes32 layout the contract interface expects.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from eth_utils import is_address

from ..errors import EncodingOverflow, InvalidArgument

BYTES32_SIZE = 32
UINT256_MAX = 2**256 - 1


class DataType(Enum):
    STRING = "string"
    NUMBER = "number"
    ADDRESS = "address"
    BYTE32 = "bytes32"


def _label(name: Optional[str]) -> str:
    return f"'{name}'" if name else "value"


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        # isdigit() accepts superscripts and other unicode digits
        if not (value.isascii() and value.isdigit()):
            return False
        value = int(value, 10)
    if isinstance(value, int):
        return 0 <= value <= UINT256_MAX
    return False


def validate_input(data_type: DataType, value: Any, name: Optional[str] = None) -> None:
    """
    Check that ``value`` has the shape required by ``data_type``.

    Raises:
        InvalidArgument: On the first mismatch
    """
    if data_type is DataType.STRING:
        if not isinstance(value, str):
            raise InvalidArgument(
                f"{_label(name)} must be a string, got {type(value).__name__}", name
            )
    elif data_type is DataType.NUMBER:
        if not _is_number(value):
            raise InvalidArgument(
                f"{_label(name)} must be an integer in the uint256 range, got {value!r}", name
            )
    elif data_type is DataType.ADDRESS:
        if not isinstance(value, str) or not is_address(value):
            raise InvalidArgument(
                f"{_label(name)} is not a valid address: {value!r}", name
            )
    elif data_type is DataType.BYTE32:
        if isinstance(value, str):
            size = len(value.encode("utf-8"))
        elif isinstance(value, (bytes, bytearray)):
            size = len(value)
        else:
            raise InvalidArgument(
                f"{_label(name)} must be text or bytes, got {type(value).__name__}", name
            )
        if size > BYTES32_SIZE:
            raise InvalidArgument(
                f"{_label(name)} is {size} bytes, at most {BYTES32_SIZE} allowed", name
            )
    else:
        raise InvalidArgument(f"Unknown data type {data_type!r}", name)


def encode_bytes32(text: str) -> bytes:
    """
    UTF-8 encode ``text`` and right-pad it with zero bytes to 32 bytes.

    The empty string encodes to 32 zero bytes.

    Raises:
        EncodingOverflow: If the encoded text is longer than 32 bytes
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"Expected text, got {type(text).__name__}")
    raw = text.encode("utf-8")
    if len(raw) > BYTES32_SIZE:
        raise EncodingOverflow(
            f"{text[:16]!r}... is {len(raw)} bytes, bytes32 holds {BYTES32_SIZE}"
        )
    return raw.ljust(BYTES32_SIZE, b"\x00")


def decode_bytes32(raw: bytes) -> str:
    """Inverse of encode_bytes32: strip trailing zero bytes and decode UTF-8."""
    if len(raw) != BYTES32_SIZE:
        raise InvalidArgument(f"Expected {BYTES32_SIZE} bytes, got {len(raw)}")
    try:
        return raw.rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidArgument(f"bytes32 value is not UTF-8 text: {exc.reason}") from exc


def sanitise_input(data_type: DataType, value: Any) -> Any:
    """Normalise ``value`` into its on-chain encoding for ``data_type``."""
    if data_type is DataType.BYTE32:
        if isinstance(value, (bytes, bytearray)):
            if len(value) > BYTES32_SIZE:
                raise EncodingOverflow(f"{len(value)} bytes do not fit in bytes32")
            return bytes(value).ljust(BYTES32_SIZE, b"\x00")
        return encode_bytes32(value)
    return value

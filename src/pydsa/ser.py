"""
Logic to read and write DSA signatures in DER wire format

A DSA signature is the ASN.1 structure SEQUENCE { INTEGER r, INTEGER s }. This
module provides the low-level DER readers/writers and the signature codec built
on top of them.
"""

from typing import Tuple, Union
from enum import Enum
from io import BytesIO
import struct

TAG_INTEGER = 0x02
TAG_SEQUENCE = 0x30


class SerializationError(Exception):
    """Error during serialization/deserialization"""
    pass


class SignatureError(Exception):
    """An error when decoding, validating or producing a DSA signature"""

    class ErrorType(Enum):
        """Types of signature errors"""
        MALFORMED_SIGNATURE = "malformed_signature"
        INVALID_SIGNATURE_RANGE = "invalid_signature_range"
        INTERNAL_RETRY_EXHAUSTED = "internal_retry_exhausted"

    def __init__(self, error_type: ErrorType, message: str = "", **context):
        self.error_type = error_type
        self.context = context
        super().__init__(f"{error_type.value}: {message}" if message else error_type.value)


def read_u8(data: bytes, offset: int) -> Tuple[int, int]:
    """Read a u8 from bytes at offset, return (value, new_offset)"""
    if offset >= len(data):
        raise SerializationError("Not enough data for u8")
    return data[offset], offset + 1


def read_der_length(data: bytes, offset: int) -> Tuple[int, int]:
    """
    Read a DER definite length at offset, return (length, new_offset)

    Indefinite and non-minimal encodings are rejected.
    """
    first, offset = read_u8(data, offset)
    if first < 0x80:
        return first, offset

    num_bytes = first & 0x7f
    if num_bytes == 0:
        raise SerializationError("Indefinite length is not allowed in DER")
    if num_bytes > 4:
        raise SerializationError("Length field too long")
    if offset + num_bytes > len(data):
        raise SerializationError("Not enough data for length")

    length_bytes = data[offset:offset + num_bytes]
    if length_bytes[0] == 0:
        raise SerializationError("Length has leading zero byte")
    length = int.from_bytes(length_bytes, byteorder='big')
    if length < 0x80:
        raise SerializationError("Long form used for short length")
    return length, offset + num_bytes


def read_der_integer(data: bytes, offset: int) -> Tuple[int, int]:
    """Read a non-negative DER INTEGER at offset, return (value, new_offset)"""
    tag, offset = read_u8(data, offset)
    if tag != TAG_INTEGER:
        raise SerializationError(f"Expected INTEGER tag, got 0x{tag:02x}")

    length, offset = read_der_length(data, offset)
    if length == 0:
        raise SerializationError("Empty INTEGER")
    if offset + length > len(data):
        raise SerializationError("INTEGER extends beyond available data")

    value = data[offset:offset + length]
    if value[0] & 0x80:
        raise SerializationError("Negative INTEGER")
    # If the MSB is 1, an extra byte is required to avoid the sign flag
    if length > 1 and value[0] == 0 and value[1] & 0x80 == 0:
        raise SerializationError("INTEGER is not minimally encoded")

    return int.from_bytes(value, byteorder='big'), offset + length


def write_der_length(out: BytesIO, length: int):
    """Write a DER definite length"""
    if length < 0x80:
        out.write(struct.pack('B', length))
    else:
        length_bytes = length.to_bytes((length.bit_length() + 7) // 8, byteorder='big')
        out.write(struct.pack('B', 0x80 | len(length_bytes)))
        out.write(length_bytes)


def write_der_integer(out: BytesIO, value: int):
    """Write a non-negative integer as a DER INTEGER"""
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded")
    # bit_length() // 8 + 1 leaves room for the sign byte when the MSB is set
    value_bytes = value.to_bytes(value.bit_length() // 8 + 1, byteorder='big')
    out.write(struct.pack('B', TAG_INTEGER))
    write_der_length(out, len(value_bytes))
    out.write(value_bytes)


def encode_signature(r: int, s: int) -> bytes:
    """Encode the signature pair (r, s) as a DER SEQUENCE of two INTEGERs"""
    body = BytesIO()
    write_der_integer(body, r)
    write_der_integer(body, s)
    content = body.getvalue()

    out = BytesIO()
    out.write(struct.pack('B', TAG_SEQUENCE))
    write_der_length(out, len(content))
    out.write(content)
    return out.getvalue()


_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_hex(text: str) -> bool:
    """True if text is made of hex digits only, no sign, prefix or whitespace"""
    return all(c in _HEX_DIGITS for c in text)


def _as_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(data, str):
        if not is_hex(data) or len(data) % 2:
            raise SerializationError("Signature is not valid hex")
        return bytes.fromhex(data)
    return bytes(data)


def decode_signature(data: Union[bytes, bytearray, str]) -> Tuple[int, int]:
    """
    Decode a DER encoded DSA signature into the pair (r, s)

    Args:
        data: DER bytes, or the same bytes as a hexadecimal string

    Returns:
        Tuple of (r, s)

    Raises:
        SignatureError: MALFORMED_SIGNATURE if data is not exactly one
            SEQUENCE holding exactly two non-negative INTEGERs
    """
    try:
        raw = _as_bytes(data)
        tag, offset = read_u8(raw, 0)
        if tag != TAG_SEQUENCE:
            raise SerializationError(f"Expected SEQUENCE tag, got 0x{tag:02x}")

        length, offset = read_der_length(raw, offset)
        end = offset + length
        if end > len(raw):
            raise SerializationError("SEQUENCE extends beyond available data")
        if end != len(raw):
            raise SerializationError("Trailing data after SEQUENCE")

        r, offset = read_der_integer(raw, offset)
        s, offset = read_der_integer(raw, offset)
        if offset != end:
            raise SerializationError("SEQUENCE holds more than two elements")
    except SerializationError as e:
        raise SignatureError(SignatureError.ErrorType.MALFORMED_SIGNATURE, str(e)) from e

    return r, s

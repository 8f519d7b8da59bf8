"""Base58 encoding and decoding of text, using the Bitcoin alphabet."""

from __future__ import annotations

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_RADIX = 58
_ZERO_DIGIT = ALPHABET[0]
_DIGIT_VALUES = {ord(c): i for i, c in enumerate(ALPHABET)}
_MAX_DECODED_BYTES = 132


class DecodeError(ValueError):
    """Raised when base58 text does not decode to valid UTF-8 text."""


class InvalidLengthError(DecodeError):
    """Raised when the decoded data would exceed the supported size."""

    def __init__(self) -> None:
        super().__init__(f"decoded data longer than {_MAX_DECODED_BYTES} bytes")


class InvalidCharacterError(DecodeError):
    """Raised for a byte outside the base58 alphabet.

    ``char`` is the offending byte taken as a character and ``index`` its
    byte offset in the UTF-8 encoded input.
    """

    def __init__(self, char: str, index: int) -> None:
        super().__init__(f"invalid character {char!r} at index {index}")
        self.char = char
        self.index = index


def encode_to_base58(text: str) -> str:
    """Encode the UTF-8 bytes of ``text``; each leading zero byte becomes '1'."""
    data = text.encode("utf-8")
    significant = data.lstrip(b"\0")
    zero_count = len(data) - len(significant)

    n = int.from_bytes(significant, "big")
    digits = []
    while n:
        n, rem = divmod(n, _RADIX)
        digits.append(ALPHABET[rem])
    return _ZERO_DIGIT * zero_count + "".join(reversed(digits))


def decode_from_base58(text: str) -> str:
    """Decode base58 ``text`` back to the UTF-8 text it encodes."""
    raw = text.encode("utf-8")
    zero_count = len(raw) - len(raw.lstrip(_ZERO_DIGIT.encode()))

    n = 0
    for index, byte in enumerate(raw[zero_count:], start=zero_count):
        value = _DIGIT_VALUES.get(byte) if byte < 0x80 else None
        if value is None:
            raise InvalidCharacterError(chr(byte), index)
        n = n * _RADIX + value
        if n.bit_length() > _MAX_DECODED_BYTES * 8:
            raise InvalidLengthError()

    body = n.to_bytes((n.bit_length() + 7) // 8, "big")
    if zero_count + len(body) > _MAX_DECODED_BYTES:
        raise InvalidLengthError()

    try:
        return (b"\0" * zero_count + body).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError("decoded data is not valid UTF-8") from exc
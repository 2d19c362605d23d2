"""Fixed-size byte strings for 256-bit hashes and 160-bit addresses."""

from __future__ import annotations

from typing import ClassVar

_HEX_CHARS = "0123456789abcdef"
_WHITESPACE = frozenset(b" \r\n\t")


class FromHexError(ValueError):
    """An invalid (non-hex) character was found while decoding."""

    def __init__(self, character: str, index: int) -> None:
        super().__init__(f"invalid hex character: {character}, at {index}")
        self.character = character
        self.index = index


def encode_hex(data: bytes, skip_leading_zero: bool = False) -> str:
    """Encode bytes as a ``0x``-prefixed lower-case hex string.

    With ``skip_leading_zero`` a zero high nibble of the first byte is dropped.
    """
    data = bytes(data)
    if not data:
        return "0x"
    first = data[0]
    parts = ["0x"]
    if first >> 4 or not skip_leading_zero:
        parts.append(_HEX_CHARS[first >> 4])
    parts.append(_HEX_CHARS[first & 0xF])
    parts.append(data[1:].hex())
    return "".join(parts)


def decode_hex(text: str, length: int) -> bytes:
    """Decode a hex string, with or without ``0x``, into exactly ``length`` bytes.

    Spaces, tabs and line breaks are skipped; bytes left unfilled stay zero.
    """
    stripped = text.startswith("0x")
    digits = (text[2:] if stripped else text).encode("utf-8")
    if len(digits) != 2 * length:
        raise ValueError(
            f"invalid length {len(digits)}, expected a (both 0x-prefixed or not) "
            f"hex string with length of {2 * length}"
        )
    out = bytearray(length)
    offset = 2 if stripped else 0
    modulus = len(digits) % 2
    buf = 0
    pos = 0
    for index, byte in enumerate(digits):
        buf = (buf << 4) & 0xFF
        if 0x41 <= byte <= 0x46:
            buf |= byte - 0x41 + 10
        elif 0x61 <= byte <= 0x66:
            buf |= byte - 0x61 + 10
        elif 0x30 <= byte <= 0x39:
            buf |= byte - 0x30
        elif byte in _WHITESPACE:
            buf >>= 4
            continue
        else:
            raise FromHexError(chr(byte), index + offset)
        modulus += 1
        if modulus == 2:
            modulus = 0
            out[pos] = buf
            pos += 1
    return bytes(out)


class _FixedHash(bytes):
    """Immutable byte string of a fixed length."""

    LENGTH: ClassVar[int] = 0

    def __new__(cls, data: bytes):
        if isinstance(data, int):
            raise TypeError(f"{cls.__name__} must be built from bytes, not int")
        raw = bytes(data)
        if len(raw) != cls.LENGTH:
            raise ValueError(
                f"{cls.__name__} needs exactly {cls.LENGTH} bytes, got {len(raw)}"
            )
        return super().__new__(cls, raw)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({encode_hex(self, False)})"


class B256(_FixedHash):
    """256-bit value, usually a hash."""

    LENGTH: ClassVar[int] = 32

    @classmethod
    def zero(cls) -> "B256":
        """The value with every byte zero."""
        return cls(bytes(cls.LENGTH))

    @classmethod
    def from_hex(cls, text: str) -> "B256":
        """Parse a hex string of exactly 64 digits."""
        return cls(decode_hex(text, cls.LENGTH))

    def to_hex(self) -> str:
        """The ``0x``-prefixed hex form."""
        return encode_hex(self, False)

    def to_b160(self) -> "B160":
        """Keep the trailing 20 bytes."""
        return B160(self[self.LENGTH - B160.LENGTH:])


class B160(_FixedHash):
    """160-bit value, usually an account address."""

    LENGTH: ClassVar[int] = 20

    @classmethod
    def zero(cls) -> "B160":
        """The value with every byte zero."""
        return cls(bytes(cls.LENGTH))

    @classmethod
    def from_int(cls, value: int) -> "B160":
        """Address whose last eight bytes hold ``value`` as a big-endian u64."""
        return cls(bytes(12) + value.to_bytes(8, "big"))

    @classmethod
    def from_hex(cls, text: str) -> "B160":
        """Parse a hex string of exactly 40 digits."""
        return cls(decode_hex(text, cls.LENGTH))

    def to_hex(self) -> str:
        """The ``0x``-prefixed hex form."""
        return encode_hex(self, False)

    def to_b256(self) -> B256:
        """Left-pad with zeros to 32 bytes."""
        return B256(bytes(B256.LENGTH - self.LENGTH) + self)


Address = B160
Hash = B256
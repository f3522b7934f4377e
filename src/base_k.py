"""
Base-k binary-to-text encoding over a custom digit set.

The byte buffer is read as one big-endian unsigned integer and written out in radix k, where
k is the number of digits (2 to 128). Unlike base64-style bit packing, this works for any k,
so base58, base36 and friends come out the same as a big-integer conversion would, zero
padded on the left to a length that depends only on the input length.

    >>> codec = BaseK("01")
    >>> codec.encode(b"\\xff")
    '11111111'
    >>> codec.decode("11111111")
    b'\\xff'
"""

import math

from radix_convert import ConversionError, OutputTooSmallError, convert_radix

__all__ = [
    "BaseK",
    "ConstructionError",
    "DigitCountError",
    "DuplicateDigitError",
    "NonAsciiDigitError",
    "ConversionError",
    "InvalidCharacterError",
    "OutputTooSmallError",
]

min_radix = 2
max_radix = 128

# Size of the character -> digit table. Digits must be 7-bit ASCII.
ascii_size = 128

# Marks code points with no digit. Always >= radix.
invalid_digit = 0xFF


class ConstructionError(ValueError):
    pass


class DigitCountError(ConstructionError):
    pass


class DuplicateDigitError(ConstructionError):
    pass


class NonAsciiDigitError(ConstructionError):
    pass


class InvalidCharacterError(ConversionError):
    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Invalid character {char!r} at position {position}")
        self.char = char
        self.position = position


def _renderings(ch: str, case_insensitive: bool) -> list[str]:
    if not case_insensitive:
        return [ch]
    return [ch.upper(), ch.lower()]


def _is_ascii_char(text: str) -> bool:
    return len(text) == 1 and ord(text) < ascii_size


class BaseK:
    """
    Encoder-decoder for one digit set. Immutable once built.
    """

    __slots__ = ("_digits", "_case_insensitive", "_log2_ratio", "_decode_map")

    def __init__(self, digits: str, case_insensitive: bool = False) -> None:
        radix = len(digits)
        if radix < min_radix or radix > max_radix:
            raise DigitCountError(
                f"Number of digits must be in [{min_radix}, {max_radix}]. Got {radix}"
            )
        if len(set(digits)) != radix:
            raise DuplicateDigitError(f"Duplicate characters in digits {digits!r}")

        decode_map = bytearray([invalid_digit] * ascii_size)
        for value, ch in enumerate(digits):
            for rendering in _renderings(ch, case_insensitive):
                if not _is_ascii_char(rendering):
                    raise NonAsciiDigitError(
                        f"Digit {ch!r} at position {value} is out of ASCII range"
                    )
                code = ord(rendering)
                if decode_map[code] not in (invalid_digit, value):
                    # only reachable in case insensitive mode, e.g. "aA"
                    raise DuplicateDigitError(
                        f"Digit {ch!r} at position {value} collides with digit "
                        f"{digits[decode_map[code]]!r} when case is ignored"
                    )
                decode_map[code] = value

        self._digits = digits
        self._case_insensitive = case_insensitive
        self._log2_ratio = math.log2(256) / math.log2(radix)
        self._decode_map = bytes(decode_map)

    @property
    def digits(self) -> str:
        return self._digits

    @property
    def radix(self) -> int:
        return len(self._digits)

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    @property
    def log2_ratio(self) -> float:
        """
        Number of digits needed per byte, log2(256) / log2(radix).
        """
        return self._log2_ratio

    @property
    def decode_map(self) -> bytes:
        return self._decode_map

    def __repr__(self) -> str:
        return f"BaseK({self._digits!r}, case_insensitive={self._case_insensitive})"

    def encoded_length(self, byte_count: int) -> int:
        return math.ceil(byte_count * self._log2_ratio)

    def decoded_length(self, char_count: int) -> int:
        return math.ceil(char_count / self._log2_ratio)

    def encode(self, data: bytes, out_size: int | None = None) -> str:
        """
        Encode bytes to text of `out_size` digits.

        `out_size` defaults to the smallest length that fits any input of len(data) bytes.
        """
        data = memoryview(data).tobytes()
        if out_size is None:
            out_size = self.encoded_length(len(data))
        values = convert_radix(data, 256, self.radix, out_size)
        return "".join(self._digits[value] for value in values)

    def decode(self, text: str, out_size: int | None = None) -> bytes:
        """
        Decode text to `out_size` bytes.

        With the default `out_size` the result may carry one extra leading zero byte. Pass
        the original length to get the exact bytes back.
        """
        if out_size is None:
            out_size = self.decoded_length(len(text))
        values = self.text_to_values(text)
        return bytes(convert_radix(values, self.radix, 256, out_size))

    def text_to_values(self, text: str) -> list[int]:
        radix = self.radix
        values = []
        for position, ch in enumerate(text):
            code = ord(ch)
            value = self._decode_map[code] if code < ascii_size else invalid_digit
            if value >= radix:
                raise InvalidCharacterError(ch, position)
            values.append(value)
        return values

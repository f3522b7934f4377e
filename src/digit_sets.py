"""
Well known digit sets for BaseK.

Each set is a plain string of digits, lowest value first. Most are spelled out with
`build_digits`, which expands "x-y" pieces to the characters between x and y, so the
sixty four digits of base64alt are just `build_digits("0-9", "a-z", "A-Z", "~_")`.
"""

from base_k import BaseK


def build_digits(*ranges: str) -> str:
    """
    Join character ranges into a digit string.

    A range "x-y" expands to every character from x to y. Any other string is
    taken as a list of characters.
    """
    chars: list[str] = []
    for part in ranges:
        if len(part) == 3 and part[1] == "-" and part[0] < part[2]:
            chars.extend(chr(code) for code in range(ord(part[0]), ord(part[2]) + 1))
        else:
            chars.extend(part)
    return "".join(chars)


def _exclude(digits: str, removed: str) -> str:
    return "".join(ch for ch in digits if ch not in removed)


named_digit_sets: dict[str, str] = {
    "base2": "01",
    "base8": build_digits("0-7"),
    "base10": build_digits("0-9"),
    "base16": build_digits("0-9", "a-f"),
    "base32": build_digits("A-Z", "2-7"),
    "base32hex": build_digits("0-9", "A-V"),
    "base36": build_digits("0-9", "a-z"),
    # Bitcoin alphabet: no 0, O, I or l
    "base58": _exclude(build_digits("1-9", "A-Z", "a-z"), "OIl"),
    "base62": build_digits("0-9", "A-Z", "a-z"),
    "base64url": build_digits("A-Z", "a-z", "0-9", "-_"),
    "base64alt": build_digits("0-9", "a-z", "A-Z", "~_"),
}


def get_digits(name_or_digits: str) -> str:
    """
    Look up a named digit set. Anything that is not a known name is used as the digits.
    """
    return named_digit_sets.get(name_or_digits, name_or_digits)


def make_codec(name_or_digits: str, case_insensitive: bool = False) -> BaseK:
    return BaseK(get_digits(name_or_digits), case_insensitive)

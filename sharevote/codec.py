"""
Numeral decoding for share values.

    decode(base, digits) -> int

Digits are '0'-'9' then 'A'-'Z' (case-insensitive) for 10-35, most
significant digit first. Python ints keep the result exact at any length.
"""
import config
from sharevote.errors import InvalidBase, InvalidDigit, DigitOutOfRange


def digit_value(char: str) -> int:
    """Map one numeral character to its value, 0-35."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 10
    raise InvalidDigit(char)


def decode(base: int, digits: str) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if not config.Config.MIN_BASE <= base <= config.Config.MAX_BASE:
        raise InvalidBase(base)

    result = 0
    for char in digits:
        value = digit_value(char)
        if value >= base:
            # letters are not part of the alphabet of bases up to 10
            if value >= 10 and base <= 10:
                raise InvalidDigit(char)
            raise DigitOutOfRange(char, base)
        result = result * base + value
    return result


def parse_base(raw) -> int:
    """
    Read a 'base' field given as decimal text (or already an int).
    Range is not checked here; decode() does that.
    """
    if isinstance(raw, bool):
        raise InvalidBase(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if text.isascii() and text.isdigit():
            return int(text)
    raise InvalidBase(raw)


def decode_coordinate(key: str) -> int:
    """Decode an x-coordinate key: decimal digits with an optional sign."""
    text = key.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if not text:
        raise InvalidDigit(key)
    return sign * decode(config.Config.X_BASE, text)

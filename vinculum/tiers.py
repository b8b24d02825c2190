"""Lookup tables shared by the converters: the symbols available at each
power of ten, and the shape each decimal digit takes in terms of those
symbols."""

from typing import Dict, Optional, Sequence, Tuple

from .types import OutOfRangeError, Role, Tier

VINCULUM = "^"
SEPARATOR = " "

SYMBOL_VALUES: Dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def wrap(symbol: str) -> str:
    """Surround a symbol with the vinculum, multiplying it by one thousand."""
    return f"{VINCULUM}{symbol}{VINCULUM}"


# Level 3 keeps a plain M as its unit so that classical numerals below 4000
# never need the vinculum.
TIERS: Sequence[Tier] = (
    Tier("I", "V", "X"),
    Tier("X", "L", "C"),
    Tier("C", "D", "M"),
    Tier("M", wrap("V"), wrap("X")),
    Tier(wrap("X"), wrap("L"), wrap("C")),
    Tier(wrap("C"), wrap("D"), wrap("M")),
)

_L, _M, _H = Role.LOW, Role.MID, Role.HIGH

# Index 0 is the digit 1.
DIGIT_PATTERNS: Sequence[Tuple[Role, ...]] = (
    (_L,),
    (_L, _L),
    (_L, _L, _L),
    (_L, _M),
    (_M,),
    (_M, _L),
    (_M, _L, _L),
    (_M, _L, _L, _L),
    (_L, _H),
)


def get_tier(level: int) -> Tier:
    if level < 0:
        raise OutOfRangeError(f"Magnitude level must not be negative: {level}")
    if level >= len(TIERS):
        raise OutOfRangeError(
            f"No roman symbols available for magnitude level {level}; the maximum is {len(TIERS) - 1}"
        )

    return TIERS[level]


def pattern_for_digit(digit: int) -> Tuple[Role, ...]:
    """Return the roles that make up a decimal digit. Zero is written as
    nothing at all."""
    if digit < 0 or digit > len(DIGIT_PATTERNS):
        raise OutOfRangeError(f"{digit} is not a decimal digit")
    if digit == 0:
        return ()

    return DIGIT_PATTERNS[digit - 1]


def digit_for_pattern(roles: Sequence[Role]) -> int:
    """Return the digit written by a sequence of roles, or 0 if no digit is
    written that way."""
    try:
        return DIGIT_PATTERNS.index(tuple(roles)) + 1
    except ValueError:
        return 0


def symbol_value(symbol: str) -> Optional[int]:
    """Return the plain value of a single numeral letter, ignoring case, or
    None if it is not one."""
    return SYMBOL_VALUES.get(symbol.upper())

"""Conversion between integers and roman numerals.

Values of one thousand and above are written with a vinculum: a symbol
wrapped in ``^`` characters is worth a thousand times its plain value, so
``^V^`` is 5000 and ``^CM^`` is 900000. Numerals may also be split into
one space-separated part per decimal digit (``MM CD LXX VIII``).

The parsers in this module are lenient: characters they do not recognize
contribute nothing, and malformed input degrades to some value rather than
raising. Use :func:`vinculum.validator.is_correct_roman_number` to reject
malformed classical numerals.
"""

import logging
from typing import List

from .tiers import (
    SEPARATOR,
    VINCULUM,
    digit_for_pattern,
    get_tier,
    pattern_for_digit,
    symbol_value,
    wrap,
)
from .types import OutOfRangeError, Role, Tier

MAX_VALUE = 1000000
logger = logging.getLogger(__name__)


def _join_runs(roman: str) -> str:
    # A closing marker followed by an opening one merges the two runs.
    return roman.replace(VINCULUM * 2, "")


def map_digit_to_roman(digit: int, tier: Tier) -> str:
    """Write a single decimal digit using the symbols of the given tier."""
    return _join_runs("".join(tier.symbol(role) for role in pattern_for_digit(digit)))


def format_vinculum_run(roman: str) -> str:
    """Wrap each symbol inside a vinculum run individually, so that
    ``^MM^`` becomes ``^M^^M^``. An unterminated run is left as it is."""
    result: List[str] = []
    run_start = -1
    for i, char in enumerate(roman):
        if char != VINCULUM:
            if run_start < 0:
                result.append(char)
            continue

        if run_start < 0:
            run_start = i
            continue

        result.extend(wrap(symbol) for symbol in roman[run_start + 1 : i])
        run_start = -1

    if run_start >= 0:
        result.append(roman[run_start:])

    return "".join(result)


def map_roman_to_digit(roman: str, level: int) -> int:
    """Read one part of a separated numeral as the digit at the given level.
    Symbols that do not belong to the level are ignored, and a part that
    does not spell any digit reads as zero."""
    tier = get_tier(level)
    if VINCULUM in roman:
        roman = format_vinculum_run(roman)

    roles: List[Role] = []
    inside_vinculum = False
    for char in roman:
        if char == VINCULUM:
            inside_vinculum = not inside_vinculum
            continue

        role = tier.role_of(wrap(char) if inside_vinculum else char)
        if role is None:
            logger.debug("Ignoring %r at magnitude level %d", char, level)
            continue
        roles.append(role)

    digit = digit_for_pattern(roles)
    if digit == 0 and roles:
        logger.debug("No digit is written as %r at magnitude level %d", roman, level)

    return digit


def to_roman(number: int, separate_parts: bool = False) -> str:
    """Convert an integer in the range 0 <= n < 1000000 to a roman numeral.
    Zero is the empty string.

    If separate_parts is True, the numeral for each decimal digit is kept
    as its own space-separated part, including the empty parts written for
    zero digits."""
    if number < 0 or number >= MAX_VALUE:
        raise OutOfRangeError(f"{number} not in range 0 <= n < {MAX_VALUE}")

    digits = str(number)
    parts = [
        map_digit_to_roman(int(digit), get_tier(len(digits) - 1 - i))
        for i, digit in enumerate(digits)
    ]
    result = SEPARATOR.join(parts)
    if separate_parts:
        return result

    return _join_runs(result.replace(SEPARATOR, ""))


def to_arabic_by_map(roman: str) -> int:
    """Convert a roman numeral to an integer, reading each space-separated
    part as the digit for one power of ten. Numerals without separators are
    handed to :func:`to_arabic_basic`."""
    if SEPARATOR not in roman:
        return to_arabic_basic(roman)

    parts = roman.upper().split(SEPARATOR)
    total = 0
    for i, part in enumerate(parts):
        level = len(parts) - 1 - i
        total += map_roman_to_digit(part, level) * 10**level

    return total


def to_arabic_basic(roman: str) -> int:
    """Convert a roman numeral to an integer using the subtractive rule: a
    symbol is subtracted if the symbol after it is worth more. Symbols inside
    a vinculum are worth a thousand times more. Unrecognized characters are
    skipped."""
    total = 0
    previous = 0
    inside_vinculum = False
    for char in reversed(roman):
        if char == VINCULUM:
            inside_vinculum = not inside_vinculum
            continue

        value = symbol_value(char)
        if value is None:
            logger.debug("Skipping unrecognized character %r", char)
            continue

        if inside_vinculum:
            value *= 1000

        if previous == 0 or value >= previous:
            total += value
        else:
            total -= value

        previous = value

    return total

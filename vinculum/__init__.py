"""Roman numeral conversion with vinculum support for values up to 999,999."""

from .converter import (
    MAX_VALUE,
    format_vinculum_run,
    map_digit_to_roman,
    map_roman_to_digit,
    to_arabic_basic,
    to_arabic_by_map,
    to_roman,
)
from .tiers import (
    SEPARATOR,
    VINCULUM,
    digit_for_pattern,
    get_tier,
    pattern_for_digit,
    symbol_value,
)
from .types import (
    ConfigError,
    OutOfRangeError,
    Role,
    Tier,
    UnknownSymbolError,
    VinculumError,
)
from .validator import is_correct_roman_number

__version__ = "0.1.0"

__all__ = [
    "MAX_VALUE",
    "SEPARATOR",
    "VINCULUM",
    "ConfigError",
    "OutOfRangeError",
    "Role",
    "Tier",
    "UnknownSymbolError",
    "VinculumError",
    "digit_for_pattern",
    "format_vinculum_run",
    "get_tier",
    "is_correct_roman_number",
    "map_digit_to_roman",
    "map_roman_to_digit",
    "pattern_for_digit",
    "symbol_value",
    "to_arabic_basic",
    "to_arabic_by_map",
    "to_roman",
]

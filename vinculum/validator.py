from .tiers import symbol_value
from .types import UnknownSymbolError


def is_correct_roman_number(roman: str) -> bool:
    """Check that a classical roman numeral obeys the repetition rules: a
    symbol may be repeated at most three times, a subtracted symbol may not
    be repeated, and a subtracted symbol must be worth more than everything
    written after its pair (so IXI is rejected).

    Unlike the converters, this function is strict about its alphabet. Any
    character other than I, V, X, L, C, D or M raises UnknownSymbolError,
    which includes the vinculum: numerals of 4000 and above cannot be checked.
    """
    previous = 0
    occurrences = 1
    previous_greater = False

    # Running value of the numeral to the right of the current position, and
    # its value before the previous symbol was counted.
    total = 0
    total_before_previous = 0

    for char in reversed(roman):
        value = symbol_value(char)
        if value is None:
            raise UnknownSymbolError(char)

        if value > previous:
            occurrences = 1
            previous_greater = False
        elif value < previous:
            occurrences = 1
            previous_greater = True
            if total_before_previous >= value:
                return False
        else:
            occurrences += 1
            if previous_greater:
                return False
            elif occurrences > 3:
                return False

        total_before_previous = total
        total += value if value >= previous else -value
        previous = value

    return True

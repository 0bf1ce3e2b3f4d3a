MIN_VALUE = 1
MAX_VALUE = 9999

OUT_OF_RANGE = "Out of Range"
PROMPT = "Enter a Number : "
RESULT_PREFIX = "The Number in Words : "

TENS_WORDS = (
    "",
    "",
    "Twenty",
    "Thirty",
    "Forty",
    "Fifty",
    "Sixty",
    "Seventy",
    "Eighty",
    "Ninety",
)
# Indexed by units + 1; slot 0 is never used.
TEEN_WORDS = (
    "",
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
)
UNIT_WORDS = (
    "",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
)


def _check_int(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}.")


def in_range(value):
    return MIN_VALUE <= value <= MAX_VALUE


def digit_groups(value):
    return (
        value // 1000,
        (value // 100) % 10,
        (value // 10) % 10,
        value % 10,
    )


def number_to_words(value):
    """Spell out value in English words.

    Values outside 1..9999 give "Out of Range". Empty table slots are joined
    as-is, so zero digits leave extra spaces (5 -> "  Five").
    """
    _check_int(value)
    if not in_range(value):
        return OUT_OF_RANGE
    thousands, hundreds, tens, units = digit_groups(value)
    parts = []
    if thousands != 0:
        parts.append(f"{UNIT_WORDS[thousands]} Thousand")
    if hundreds != 0:
        parts.append(f" {UNIT_WORDS[hundreds]} Hundred")
    if (tens != 0 or units != 0) and (thousands != 0 or hundreds != 0):
        parts.append(" And")
    if tens == 1:
        parts.append(f" {TEEN_WORDS[units + 1]}")
    else:
        parts.append(f" {TENS_WORDS[tens]} {UNIT_WORDS[units]}")
    return "".join(parts)


def parse_number(text):
    return int(text.strip())


def format_result(value):
    words = number_to_words(value)
    if words == OUT_OF_RANGE:
        return OUT_OF_RANGE
    return f"{RESULT_PREFIX}{words}"

UNITS = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)
TEENS = (
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)
TENS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)
SHORT_SCALE = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
)

ZERO = "zero"
HUNDRED = "hundred"

MAX_TRIPLETS = len(SHORT_SCALE)
MAX_VALUE = 1000 ** MAX_TRIPLETS - 1
UINT64_MAX = 2 ** 64 - 1


def _check_number(number):
    # bool is an int subclass but never a meaningful count.
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"number must be an int, got {type(number).__name__}.")
    if number < 0:
        raise ValueError(f"negative numbers are not supported: {number}")
    if number > MAX_VALUE:
        raise ValueError(
            f"{number} is beyond the largest supported scale ({SHORT_SCALE[-1]})."
        )


def split_digits(n):
    return n // 100, n % 100 // 10, n % 10


def convert_triplet_to_phrase(n):
    if not 0 <= n <= 999:
        raise ValueError(f"triplet must be in [0, 999], got {n}.")
    hundreds_digit, tens_digit, ones_digit = split_digits(n)
    words = []
    if hundreds_digit > 0:
        words.append(f"{UNITS[hundreds_digit]} {HUNDRED}")
    if tens_digit > 0 or ones_digit > 0:
        if tens_digit == 0:
            words.append(UNITS[ones_digit])
        elif tens_digit == 1:
            words.append(TEENS[ones_digit])
        elif ones_digit == 0:
            words.append(TENS[tens_digit])
        else:
            words.append(f"{TENS[tens_digit]}-{UNITS[ones_digit]}")
    return " ".join(words)


def split_number_into_triplets(number):
    """Yield the base-1000 groups of ``number``, least significant first.

    Nothing is yielded for zero. A ninth group has no scale word, so asking
    for one raises ``ValueError``.
    """
    remaining = number
    count = 0
    while remaining:
        if count == MAX_TRIPLETS:
            raise ValueError(f"{number} needs more than {MAX_TRIPLETS} triplets.")
        yield remaining % 1000
        remaining //= 1000
        count += 1


def _group_phrase(triplet, scale):
    phrase = convert_triplet_to_phrase(triplet)
    if not scale:
        return phrase
    return f"{phrase} {scale}"


def number_to_words(number):
    _check_number(number)
    if number == 0:
        return ZERO
    groups = list(zip(split_number_into_triplets(number), SHORT_SCALE))
    return " ".join(
        _group_phrase(triplet, scale)
        for triplet, scale in reversed(groups)
        if triplet != 0
    )

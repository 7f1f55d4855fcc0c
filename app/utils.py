import math

WORDS_PER_MINUTE = 238


def calculate_reading_time(text: str) -> int:
    """Whole minutes needed to read ``text``, never less than one.

    Markup is not stripped: tags split on whitespace count as words.
    """
    words = text.split()
    return max(1, math.ceil(len(words) / WORDS_PER_MINUTE))

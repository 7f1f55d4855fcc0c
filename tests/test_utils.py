import pytest

from app.utils import WORDS_PER_MINUTE, calculate_reading_time


def words(count: int) -> str:
    return " ".join(["word"] * count)


def test_empty_text_reads_in_one_minute():
    assert calculate_reading_time("") == 1
    assert calculate_reading_time("   \n\t ") == 1


@pytest.mark.parametrize(
    "count, minutes",
    [(1, 1), (238, 1), (239, 2), (476, 2), (477, 3), (2380, 10), (2381, 11)],
)
def test_reading_time_rounds_up_whole_minutes(count, minutes):
    assert calculate_reading_time(words(count)) == minutes


def test_runs_of_whitespace_count_once():
    text = "one\n\n two\t\tthree    four"
    assert calculate_reading_time(text) == 1
    assert len(text.split()) == 4


def test_markup_tokens_count_as_words():
    html = " ".join(["<p>word</p> <b>x</b>"] * (WORDS_PER_MINUTE // 2 + 1))
    assert calculate_reading_time(html) == 2

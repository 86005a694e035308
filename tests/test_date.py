import io

from taskboard.console import Console
from taskboard.date import MAX_YEAR, MIN_YEAR, Date


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_str_has_no_padding():
    assert str(Date(2025, 3, 7)) == "2025-3-7"


def test_prompt_reads_valid_values():
    console, out = make("2030\n6\n15\n")
    assert Date.prompt(console) == Date(2030, 6, 15)
    text = out.getvalue()
    assert text == "Enter year: Enter month: Enter day: "


def test_prompt_repeats_until_year_in_range():
    console, out = make("2019\n2051\n2020\n1\n1\n")
    date = Date.prompt(console)
    assert date.year == MIN_YEAR
    assert out.getvalue().count("Enter year: ") == 3


def test_prompt_accepts_upper_bounds():
    console, _ = make(f"{MAX_YEAR}\n12\n31\n")
    assert Date.prompt(console) == Date(MAX_YEAR, 12, 31)


def test_prompt_repeats_month_and_day_out_of_range():
    console, out = make("2024\n0\n13\n2\n32\n0\n29\n")
    assert Date.prompt(console) == Date(2024, 2, 29)
    text = out.getvalue()
    assert text.count("Enter month: ") == 3
    assert text.count("Enter day: ") == 3


def test_prompt_skips_non_numeric_answers():
    console, out = make("soon\n2040\nmay\n5\nfirst\n1\n")
    assert Date.prompt(console) == Date(2040, 5, 1)
    assert out.getvalue().count("Enter year: ") == 2


def test_dates_compare_by_value():
    first = Date(2030, 1, 2)
    same = Date(2030, 1, 2)
    other = Date(2030, 1, 3)
    assert (first == same) is True
    assert (first == other) is False
    assert len({first, same, other}) == 2
    assert {str(d) for d in {first, same, other}} == {"2030-1-2", "2030-1-3"}
from datetime import date, timedelta

import pytest

from utils.date_parser import parse_date


@pytest.mark.parametrize("text", ["2024-01-10", " 2024-01-10 ", "2024/01/10", "10.01.2024", "10/01/2024"])
def test_known_formats(text):
    assert parse_date(text) == date(2024, 1, 10)


def test_natural_language_date():
    assert parse_date("tomorrow") == date.today() + timedelta(days=1)


def test_month_name_with_year():
    assert parse_date("12 January 2024") == date(2024, 1, 12)


@pytest.mark.parametrize("text", ["", "   ", "banana"])
def test_unparseable_returns_none(text):
    assert parse_date(text) is None


@pytest.mark.parametrize("text", ["5", "101", "10 1"])
def test_bare_numbers_are_not_guessed(text):
    assert parse_date(text) is None

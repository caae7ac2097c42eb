import re
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from app.utils.amounts import MAX_COUNT, remaining_balance, to_amount, to_count, to_text
from app.utils.months import MONTH_KEY_PATTERN, as_utc, current_month_key, month_key, utc_now


@pytest.mark.parametrize("value, expected", [
    (None, 0.0),
    ("", 0.0),
    ("abc", 0.0),
    ("12.5", 12.5),
    (" 300 ", 300.0),
    (-40, -40.0),
    ("-15", -15.0),
    (float("nan"), 0.0),
    ("inf", 0.0),
    ([1, 2], 0.0),
    (True, 1.0),
])
def test_to_amount(value, expected):
    assert to_amount(value) == expected


def test_to_count_truncates():
    assert to_count("3.9") == 3
    assert to_count("cuotas") == 0
    assert to_count(None) == 0


def test_to_count_is_bounded():
    assert to_count(1e20) == MAX_COUNT
    assert to_count("-1e20") == -MAX_COUNT
    assert to_count(MAX_COUNT) == MAX_COUNT


def test_to_text():
    assert to_text(None) == ""
    assert to_text(5) == "5"
    assert to_text("Salario") == "Salario"


def test_remaining_balance_never_negative():
    assert remaining_balance(1200, 100, 3) == 900
    assert remaining_balance(1200, 100, 12) == 0
    assert remaining_balance(1200, 150, 12) == 0


@pytest.mark.parametrize("value, valid", [
    ("2024-01", True),
    ("2024-12", True),
    ("2024-13", False),
    ("2024-00", False),
    ("2024-1", False),
    ("24-01", False),
    ("", False),
])
def test_month_key_pattern(value, valid):
    assert bool(re.match(MONTH_KEY_PATTERN, value)) is valid


def test_month_key_is_zero_padded():
    assert month_key(datetime(2025, 3, 9)) == "2025-03"


def test_current_month_key_with_timezone():
    assert re.match(MONTH_KEY_PATTERN, current_month_key("America/Bogota"))
    assert re.match(MONTH_KEY_PATTERN, current_month_key())


def test_utc_now_is_aware():
    assert utc_now().tzinfo is timezone.utc


def test_as_utc_marks_naive_datetimes():
    naive = datetime(2024, 5, 1, 12, 30)
    assert as_utc(naive) == datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

    bogota = datetime(2024, 5, 1, 7, 30, tzinfo=ZoneInfo("America/Bogota"))
    assert as_utc(bogota) is bogota

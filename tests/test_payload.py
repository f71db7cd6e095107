from datetime import date

import pytest

from services.errors import ValidationError
from utils.payload import as_int, date_value, int_value


def test_date_value_parses_plain_dates():
    assert date_value({"due": "2025-01-06"}, "due") == date(2025, 1, 6)


def test_date_value_accepts_full_datetimes():
    assert date_value({"due": "2025-01-06T08:15:00"}, "due") == date(2025, 1, 6)


def test_date_value_treats_blank_as_missing():
    assert date_value({"due": "  "}, "due") is None
    assert date_value({}, "due") is None


@pytest.mark.parametrize("value", ["2025-01-06garbage", "06/01/2025", "2025-13-01"])
def test_date_value_rejects_malformed_dates(value):
    with pytest.raises(ValidationError):
        date_value({"due": value}, "due")


def test_int_value_falls_back_to_default():
    assert int_value({}, "impact", 1) == 1
    assert int_value({"impact": 0}, "impact", 1) == 1
    assert int_value({"impact": "5"}, "impact", 1) == 5


@pytest.mark.parametrize("value", [2.7, "2.7", True, "high"])
def test_as_int_rejects_non_integers(value):
    with pytest.raises(ValidationError) as raised:
        as_int(value, "impact")

    assert raised.value.message == "Field 'impact' must be an integer"


def test_as_int_accepts_whole_floats():
    assert as_int(4.0, "impact") == 4

import logging

import pytest

from studio.core.conversions import normalize_time, parse_iso_date, time_plus_one_hour
from studio.core.errors import NotFound, StudioError, ValidationError
from studio.core.logging_config import PersonalDataFilter, get_logger


def test_errors_carry_codes_and_stay_value_errors():
    error = NotFound("Session x not found")

    assert isinstance(error, StudioError)
    assert isinstance(error, ValueError)
    assert error.code == "NOT_FOUND"
    assert error.message == "Session x not found"


@pytest.mark.parametrize("value, expected", [("9:00", "09:00"), ("23:30", "23:30"), (" 07:05 ", "07:05")])
def test_normalize_time(value, expected):
    assert normalize_time(value) == expected


def test_time_and_date_parsing():
    assert time_plus_one_hour("21:15") == "22:15"
    assert parse_iso_date("2024-02-29").isoformat() == "2024-02-29"
    with pytest.raises(ValidationError):
        parse_iso_date("10/01/2024")
    with pytest.raises(ValidationError):
        normalize_time("9am")


def test_personal_data_filter_masks_contacts_but_not_dates():
    record = logging.LogRecord(
        "studio", logging.INFO, __file__, 1,
        "Student ana@example.com (555-0101) booked %s", ("2024-01-10",), None,
    )

    PersonalDataFilter().filter(record)

    assert record.getMessage() == "Student [EMAIL] ([PHONE]) booked 2024-01-10"


def test_get_logger_namespace():
    assert get_logger("main").name == "studio.main"

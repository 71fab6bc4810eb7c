"""
Tests for request field validation.

Pure functions, no database access.
"""

from datetime import date

import pytest

from apps.bags.validation import (
    MSG_INVALID_DATE,
    MSG_NOT_AN_INTEGER,
    MSG_NOT_A_NUMBER,
    MSG_REQUIRED,
    is_blank,
    parse_calendar_date,
    parse_optional_number,
    validate_date,
    validate_optional_integer,
    validate_optional_number,
    validate_required_text,
)


# =============================================================================
# Numbers
# =============================================================================

class TestParseOptionalNumber:

    @pytest.mark.parametrize('value', [None, '', '   '])
    def test_blank_is_none(self, value):
        assert parse_optional_number(value) is None

    def test_numeric_string(self):
        assert parse_optional_number(' 18.5 ') == 18.5

    @pytest.mark.parametrize('value', [True, False, 'abc', [], {}, float('nan'), 'inf', float('-inf')])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(ValueError):
            parse_optional_number(value)


class TestValidateOptionalInteger:

    def test_absent_is_valid(self):
        assert validate_optional_integer(None, 'dose', 0, 1000) == (None, None)
        assert validate_optional_integer('', 'dose', 0, 1000) == (None, None)

    def test_accepts_whole_numbers(self):
        assert validate_optional_integer(18, 'dose', 0, 1000) == (18, None)
        assert validate_optional_integer('18', 'dose', 0, 1000) == (18, None)
        assert validate_optional_integer(18.0, 'dose', 0, 1000) == (18, None)

    def test_bounds_are_inclusive(self):
        assert validate_optional_integer(0, 'dose', 0, 1000) == (0, None)
        assert validate_optional_integer(1000, 'dose', 0, 1000) == (1000, None)

    def test_above_maximum(self):
        value, problem = validate_optional_integer(1001, 'dose', 0, 1000)

        assert value is None
        assert problem == {'field': 'dose', 'message': 'must be between 0 and 1000'}

    def test_below_minimum(self):
        _, problem = validate_optional_integer(-1, 'waterAmount', 0, 5000)
        assert problem == {'field': 'waterAmount', 'message': 'must be between 0 and 5000'}

    def test_fraction_is_not_an_integer(self):
        _, problem = validate_optional_integer(18.5, 'dose', 0, 1000)
        assert problem == {'field': 'dose', 'message': MSG_NOT_AN_INTEGER}

    @pytest.mark.parametrize('value', [True, 'eighteen', float('nan')])
    def test_not_a_number(self, value):
        _, problem = validate_optional_integer(value, 'nutty', 0, 5)
        assert problem == {'field': 'nutty', 'message': MSG_NOT_A_NUMBER}


class TestValidateOptionalNumber:

    def test_accepts_decimal_rating(self):
        assert validate_optional_number(3.75, 'rating', 0, 5) == (3.75, None)
        assert validate_optional_number('4.5', 'rating', 0, 5) == (4.5, None)

    def test_out_of_range(self):
        _, problem = validate_optional_number(5.1, 'rating', 0, 5)
        assert problem == {'field': 'rating', 'message': 'must be between 0 and 5'}

    def test_not_a_number(self):
        _, problem = validate_optional_number('great', 'rating', 0, 5)
        assert problem['message'] == MSG_NOT_A_NUMBER


# =============================================================================
# Text & dates
# =============================================================================

class TestValidateRequiredText:

    def test_strips_value(self):
        assert validate_required_text('  V60 ', 'method') == ('V60', None)

    @pytest.mark.parametrize('value', [None, '', '   ', 42])
    def test_missing_or_blank(self, value):
        assert validate_required_text(value, 'method') == (None, {'field': 'method', 'message': MSG_REQUIRED})

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank(' ')
        assert not is_blank(0)


class TestDates:

    def test_plain_date(self):
        assert parse_calendar_date('2026-01-15') == date(2026, 1, 15)

    def test_iso_datetime(self):
        assert parse_calendar_date('2026-01-15T08:30:00Z') == date(2026, 1, 15)

    @pytest.mark.parametrize('value', ['2026-02-30', 'yesterday', '15/01/2026', 20260115])
    def test_invalid_dates(self, value):
        assert validate_date(value, 'roastDate') == (None, {'field': 'roastDate', 'message': MSG_INVALID_DATE})

    def test_required_date_missing(self):
        assert validate_date('', 'roastDate', required=True) == (None, {'field': 'roastDate', 'message': MSG_REQUIRED})

    def test_optional_date_missing(self):
        assert validate_date(None, 'roastDate') == (None, None)

"""
Testes Unitários - Validators
"""
from datetime import date

import pytest

from domain.exceptions import (
    InvalidCoordinatesException,
    InvalidDateRangeException,
    InvalidPeriodException,
    InvalidScenarioException,
    InvalidYearRangeException,
    MissingParameterException
)
from domain.value_objects.climate_scenario import ClimateScenario
from shared.utils.validators import (
    CoordinatesValidator,
    DateRangeValidator,
    DecadeRangeValidator,
    GenericValidator,
    PeriodsValidator,
    ScenarioValidator,
    TrendRangeValidator,
    YearsValidator
)

CURRENT_YEAR = 2026
TODAY = date(2026, 10, 16)


class TestGenericValidator:

    def test_require_lists_all_documented_names(self):
        with pytest.raises(MissingParameterException) as exc_info:
            GenericValidator.require({'lat': '40'}, ['lat', 'lon', 'years'])

        assert exc_info.value.message == "Missing required parameters: lat, lon, years"
        assert exc_info.value.details['missing'] == ['lon', 'years']

    def test_empty_string_counts_as_missing(self):
        with pytest.raises(MissingParameterException):
            GenericValidator.require({'lat': '', 'lon': '1'}, ['lat', 'lon'])

    def test_require_ok(self):
        GenericValidator.require({'lat': '0', 'lon': '0'}, ['lat', 'lon'])


class TestCoordinatesValidator:

    def test_valid(self):
        coordinates = CoordinatesValidator.validate('40.7128', '-74.0060')

        assert coordinates.latitude == 40.7128
        assert coordinates.longitude == -74.006

    @pytest.mark.parametrize("lat,lon", [
        ('90.1', '0'),
        ('0', '-180.5'),
        ('abc', '10'),
        ('10', None),
        ('nan', '0'),
    ])
    def test_invalid(self, lat, lon):
        with pytest.raises(InvalidCoordinatesException):
            CoordinatesValidator.validate(lat, lon)

    def test_boundaries_are_valid(self):
        coordinates = CoordinatesValidator.validate('-90', '180')

        assert coordinates.latitude == -90.0


class TestYearsValidator:

    def test_preserves_order(self):
        assert YearsValidator.validate('2020, 2018,2019', current_year=CURRENT_YEAR) == [2020, 2018, 2019]

    def test_duplicates_collapse_to_first_occurrence(self):
        assert YearsValidator.validate('2020,2020,2020', current_year=CURRENT_YEAR) == [2020]
        assert YearsValidator.validate('2019,2020,2019', current_year=CURRENT_YEAR) == [2019, 2020]

    def test_non_numeric_tokens_are_dropped(self):
        assert YearsValidator.validate('2020,abc,2021', current_year=CURRENT_YEAR) == [2020, 2021]

    def test_nothing_numeric(self):
        with pytest.raises(InvalidYearRangeException, match="Invalid years format"):
            YearsValidator.validate('abc', current_year=CURRENT_YEAR)

    def test_current_year_is_rejected(self):
        with pytest.raises(InvalidYearRangeException) as exc_info:
            YearsValidator.validate('2025,2026', current_year=CURRENT_YEAR)

        assert exc_info.value.details['invalid'] == [2026]

    def test_before_1940_is_rejected(self):
        with pytest.raises(InvalidYearRangeException):
            YearsValidator.validate('1939', current_year=CURRENT_YEAR)

    def test_at_most_ten_years(self):
        eleven = ','.join(str(y) for y in range(2000, 2011))

        with pytest.raises(InvalidYearRangeException, match="Maximum 10 years"):
            YearsValidator.validate(eleven, current_year=CURRENT_YEAR)

        assert len(YearsValidator.validate(','.join(str(y) for y in range(2000, 2010)), CURRENT_YEAR)) == 10


class TestDateRangeValidator:

    def test_valid(self):
        assert DateRangeValidator.validate('2020-01-01', '2020-12-31', today=TODAY) == ('2020-01-01', '2020-12-31')

    @pytest.mark.parametrize("start,end", [
        ('2020/01/01', '2020-12-31'),
        ('2020-02-30', '2020-12-31'),
        ('1939-12-31', '1940-06-01'),
        ('2026-01-01', '2026-10-15'),
        ('2020-06-01', '2020-06-01'),
        ('2020-06-02', '2020-06-01'),
        ('2010-01-01', '2016-01-01'),
    ])
    def test_invalid(self, start, end):
        with pytest.raises(InvalidDateRangeException):
            DateRangeValidator.validate(start, end, today=TODAY)

    def test_archive_delay(self):
        """REGRA: endDate até hoje - 2 dias"""
        assert DateRangeValidator.validate('2026-10-01', '2026-10-14', today=TODAY)


class TestDecadeRangeValidator:

    def test_normalizes_and_expands(self):
        start, end, years = DecadeRangeValidator.validate('1985', '1999', current_year=CURRENT_YEAR)

        assert (start, end) == (1980, 1990)
        assert years == list(range(1980, 2000))

    def test_current_decade_limited_to_last_full_year(self):
        _, _, years = DecadeRangeValidator.validate('2010', '2010', current_year=CURRENT_YEAR)

        assert years == list(range(2010, 2020))

    def test_more_than_five_decades(self):
        with pytest.raises(InvalidYearRangeException, match="5 decades"):
            DecadeRangeValidator.validate('1950', '2000', current_year=CURRENT_YEAR)

    def test_five_decades_ok(self):
        _, _, years = DecadeRangeValidator.validate('1960', '2000', current_year=CURRENT_YEAR)

        assert len(years) == 50

    @pytest.mark.parametrize("start,end", [('1930', '1950'), ('2000', '2030'), ('abc', '2000')])
    def test_invalid(self, start, end):
        with pytest.raises(InvalidYearRangeException):
            DecadeRangeValidator.validate(start, end, current_year=CURRENT_YEAR)

    def test_reversed_range(self):
        with pytest.raises(InvalidYearRangeException):
            DecadeRangeValidator.validate('2000', '1990', current_year=CURRENT_YEAR)


class TestTrendRangeValidator:

    def test_valid(self):
        assert TrendRangeValidator.validate('2000', '2020', current_year=CURRENT_YEAR) == (2000, 2020)

    @pytest.mark.parametrize("start,end", [
        ('2015', '2020'),
        ('1939', '1960'),
        ('2000', '2026'),
        ('2020', '2000'),
        ('1950', '2000'),
        ('x', '2000'),
    ])
    def test_invalid(self, start, end):
        with pytest.raises(InvalidYearRangeException):
            TrendRangeValidator.validate(start, end, current_year=CURRENT_YEAR)

    def test_fifty_years_ok(self):
        assert TrendRangeValidator.validate('1951', '2000', current_year=CURRENT_YEAR) == (1951, 2000)


class TestScenarioAndPeriods:

    def test_default_scenario(self):
        assert ScenarioValidator.validate(None) is ClimateScenario.MODERATE

    def test_invalid_scenario(self):
        with pytest.raises(InvalidScenarioException):
            ScenarioValidator.validate('catastrophic')

    def test_default_periods(self):
        assert PeriodsValidator.validate(None) == ['2030s', '2040s', '2050s']

    def test_custom_periods(self):
        assert PeriodsValidator.validate('2020s, 2050s') == ['2020s', '2050s']

    def test_invalid_period(self):
        with pytest.raises(InvalidPeriodException) as exc_info:
            PeriodsValidator.validate('2030s,2070s')

        assert exc_info.value.details['invalid'] == ['2070s']

"""
Validators Utility
Input validation with domain exceptions
"""
import re
from datetime import date, datetime, timedelta
from typing import List, Optional, Type

from domain.constants import Climate, Projection
from domain.exceptions import (
    InvalidDateRangeException,
    InvalidPeriodException,
    InvalidYearRangeException,
    MissingParameterException
)
from domain.value_objects.climate_scenario import ClimateScenario
from domain.value_objects.coordinates import Coordinates

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def _today() -> date:
    return date.today()


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""

    @staticmethod
    def require(params: dict, names: List[str]) -> None:
        """
        Garante presença de todos os parâmetros obrigatórios

        Raises:
            MissingParameterException: Lista todos os nomes, como a rota os documenta
        """
        missing = [name for name in names if params.get(name) in (None, '')]
        if missing:
            raise MissingParameterException(
                f"Missing required parameters: {', '.join(names)}",
                details={"missing": missing}
            )

    @staticmethod
    def parse_int(value: str, param_name: str, exception_class: Type[Exception], message: str) -> int:
        try:
            return int(str(value).strip())
        except (TypeError, ValueError):
            raise exception_class(message, details={param_name: value})


class CoordinatesValidator:
    """Validate lat/lon query parameters"""

    @staticmethod
    def validate(lat: Optional[str], lon: Optional[str]) -> Coordinates:
        """
        Converte e valida latitude/longitude

        Raises:
            InvalidCoordinatesException: Se não numéricas ou fora do range
        """
        try:
            latitude = float(lat)
            longitude = float(lon)
        except (TypeError, ValueError):
            latitude = longitude = float('nan')

        # NaN falha nas comparações de range dentro do value object
        return Coordinates(latitude=latitude, longitude=longitude)


class YearsValidator:
    """Validate comma-separated years for the yearly endpoint"""

    @staticmethod
    def validate(years: str, current_year: Optional[int] = None) -> List[int]:
        """
        Valida lista de anos (1..10 anos, 1940..ano anterior)

        Tokens não numéricos são descartados; anos repetidos contam uma vez
        e a ordem da primeira ocorrência é preservada.

        Raises:
            InvalidYearRangeException: Formato, range ou quantidade inválidos
        """
        current_year = current_year or _today().year
        parsed = []
        for token in years.split(','):
            token = token.strip()
            if re.fullmatch(r'-?\d+', token):
                parsed.append(int(token))
        parsed = list(dict.fromkeys(parsed))

        if not parsed:
            raise InvalidYearRangeException(
                "Invalid years format. Provide comma-separated years like: 2020,2021,2022",
                details={"years": years}
            )

        invalid = [y for y in parsed if y < Climate.MIN_YEAR or y >= current_year]
        if invalid:
            raise InvalidYearRangeException(
                f"Invalid years: {', '.join(str(y) for y in invalid)}. "
                f"Years must be between {Climate.MIN_YEAR} and {current_year - 1}",
                details={"invalid": invalid}
            )

        if len(parsed) > Climate.MAX_YEARS_PER_REQUEST:
            raise InvalidYearRangeException(
                f"Too many years requested. Maximum {Climate.MAX_YEARS_PER_REQUEST} years per request.",
                details={"count": len(parsed)}
            )

        return parsed


class DateRangeValidator:
    """Validate startDate/endDate for the raw historical endpoint"""

    @staticmethod
    def validate(start_date: str, end_date: str, today: Optional[date] = None) -> tuple:
        """
        Raises:
            InvalidDateRangeException: Formato, limites, ordem ou extensão inválidos
        """
        if not DATE_PATTERN.match(start_date) or not DATE_PATTERN.match(end_date):
            raise InvalidDateRangeException(
                "Invalid date format. Use YYYY-MM-DD format.",
                details={"startDate": start_date, "endDate": end_date}
            )

        try:
            start = datetime.strptime(start_date, '%Y-%m-%d').date()
            end = datetime.strptime(end_date, '%Y-%m-%d').date()
        except ValueError:
            raise InvalidDateRangeException(
                "Invalid date format. Use YYYY-MM-DD format.",
                details={"startDate": start_date, "endDate": end_date}
            )

        min_date = datetime.strptime(Climate.MIN_DATE, '%Y-%m-%d').date()
        max_date = (today or _today()) - timedelta(days=Climate.ARCHIVE_DELAY_DAYS)

        if start < min_date or end > max_date:
            raise InvalidDateRangeException(
                f"Date range must be between {Climate.MIN_DATE} and {max_date.isoformat()}",
                details={"startDate": start_date, "endDate": end_date}
            )

        if start >= end:
            raise InvalidDateRangeException(
                "Start date must be before end date",
                details={"startDate": start_date, "endDate": end_date}
            )

        if (end - start).days > Climate.MAX_HISTORICAL_RANGE_DAYS:
            raise InvalidDateRangeException(
                "Date range too large. Maximum 5 years per request.",
                details={"days": (end - start).days}
            )

        return start_date, end_date


class DecadeRangeValidator:
    """Validate startDecade/endDecade and expand them into years"""

    @staticmethod
    def validate(start_decade: str, end_decade: str, current_year: Optional[int] = None) -> tuple:
        """
        Normaliza para início de década (1985 -> 1980) e expande os anos

        Returns:
            (start, end, years) com years limitado ao último ano completo

        Raises:
            InvalidYearRangeException: Formato, range ou mais de 50 anos
        """
        current_year = current_year or _today().year
        message = "Invalid decade format. Use 4-digit years like: 1980, 1990, 2000"
        start = GenericValidator.parse_int(start_decade, "startDecade", InvalidYearRangeException, message)
        end = GenericValidator.parse_int(end_decade, "endDecade", InvalidYearRangeException, message)

        start = (start // 10) * 10
        end = (end // 10) * 10

        if start < Climate.MIN_YEAR or end >= current_year:
            raise InvalidYearRangeException(
                f"Decade range must be between {Climate.MIN_YEAR} and {(current_year // 10) * 10 - 10}",
                details={"startDecade": start, "endDecade": end}
            )

        last_full_year = current_year - 1
        years = [
            year
            for decade in range(start, end + 1, 10)
            for year in range(decade, decade + 10)
            if year <= last_full_year
        ]

        if not years:
            raise InvalidYearRangeException(
                "startDecade must not be after endDecade",
                details={"startDecade": start, "endDecade": end}
            )

        if len(years) > Climate.MAX_DECADAL_YEARS:
            raise InvalidYearRangeException(
                "Too many years requested. Limit to 5 decades maximum.",
                details={"years": len(years)}
            )

        return start, end, years


class TrendRangeValidator:
    """Validate startYear/endYear for trend analysis"""

    @staticmethod
    def validate(start_year: str, end_year: str, current_year: Optional[int] = None) -> tuple:
        """
        Raises:
            InvalidYearRangeException: Formato, range, menos de 10 ou mais de 50 anos
        """
        last_full_year = (current_year or _today().year) - 1
        message = "Invalid year format. Use 4-digit years like: 1980, 2020"
        start = GenericValidator.parse_int(start_year, "startYear", InvalidYearRangeException, message)
        end = GenericValidator.parse_int(end_year, "endYear", InvalidYearRangeException, message)

        if start < Climate.MIN_YEAR or end > last_full_year or start >= end:
            raise InvalidYearRangeException(
                f"Invalid year range. Must be between {Climate.MIN_YEAR} and {last_full_year}, "
                "with startYear < endYear",
                details={"startYear": start, "endYear": end}
            )

        if end - start < Climate.MIN_TREND_SPAN_YEARS:
            raise InvalidYearRangeException(
                f"Minimum {Climate.MIN_TREND_SPAN_YEARS} years required for trend analysis",
                details={"startYear": start, "endYear": end}
            )

        if end - start + 1 > Climate.MAX_TREND_YEARS:
            raise InvalidYearRangeException(
                f"Too many years requested. Maximum {Climate.MAX_TREND_YEARS} years for trend analysis.",
                details={"years": end - start + 1}
            )

        return start, end


class ScenarioValidator:
    """Validate scenario query parameter"""

    @staticmethod
    def validate(scenario: Optional[str]) -> ClimateScenario:
        return ClimateScenario.from_string(scenario or ClimateScenario.MODERATE.value)


class PeriodsValidator:
    """Validate comma-separated projection periods"""

    @staticmethod
    def validate(periods: Optional[str]) -> List[str]:
        """
        Raises:
            InvalidPeriodException: Se algum rótulo não existir
        """
        if not periods:
            return list(Projection.DEFAULT_FILTER_PERIODS)

        requested = [p.strip() for p in periods.split(',')]
        valid = list(Projection.PERIOD_RANGES)
        invalid = [p for p in requested if p not in valid]

        if invalid:
            raise InvalidPeriodException(
                f"Invalid periods: {', '.join(invalid)}. Valid periods: {', '.join(valid)}",
                details={"invalid": invalid, "valid": valid}
            )

        return requested

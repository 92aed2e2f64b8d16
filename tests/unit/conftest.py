"""
Configurações e fixtures compartilhadas para testes unitários
"""
import asyncio
from datetime import date, timedelta
from typing import List, Optional

import pytest

from domain.entities.daily_record import DailyRecord
from domain.entities.yearly_summary import YearlySummary
from domain.value_objects.coordinates import Coordinates


class VirtualClock:
    """
    Relógio virtual: sleep() avança o tempo instantaneamente

    Registra cada espera para que os testes verifiquem o pacing.
    """

    def __init__(self, start: float = 1000.0):
        self._now = start
        self.sleeps: List[float] = []

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += seconds

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self._now += seconds
        await asyncio.sleep(0)


@pytest.fixture
def virtual_clock():
    return VirtualClock()


@pytest.fixture
def nyc():
    return Coordinates(latitude=40.7128, longitude=-74.0060)


@pytest.fixture
def make_daily_record():
    """
    Factory fixture para criar DailyRecord com valores padrão

    Usage:
        def test_something(make_daily_record):
            record = make_daily_record(temperature_mean=None)
    """
    def _make(
        date: str = '2020-06-01',
        temperature_max: Optional[float] = 25.0,
        temperature_min: Optional[float] = 15.0,
        temperature_mean: Optional[float] = 20.0,
        precipitation: float = 1.0,
        humidity: Optional[float] = 60.0,
        wind_speed: Optional[float] = 10.0,
        pressure: Optional[float] = 1013.0
    ) -> DailyRecord:
        return DailyRecord(
            date=date,
            temperature_max=temperature_max,
            temperature_min=temperature_min,
            temperature_mean=temperature_mean,
            precipitation=precipitation,
            humidity=humidity,
            wind_speed=wind_speed,
            pressure=pressure
        )

    return _make


@pytest.fixture
def make_year_records(make_daily_record):
    """
    Factory fixture: um registro por dia do ano com temperatura média constante
    """
    def _make(year: int, temperature_mean: float = 20.0, precipitation: float = 2.0) -> List[DailyRecord]:
        day = date(year, 1, 1)
        records = []
        while day.year == year:
            records.append(make_daily_record(
                date=day.isoformat(),
                temperature_max=temperature_mean + 5,
                temperature_min=temperature_mean - 5,
                temperature_mean=temperature_mean,
                precipitation=precipitation
            ))
            day += timedelta(days=1)
        return records

    return _make


@pytest.fixture
def make_yearly_summary():
    """Factory fixture para criar YearlySummary com valores padrão"""
    def _make(
        year: int = 2020,
        temperature_mean_avg: float = 15.0,
        precipitation_total: float = 800.0,
        **overrides
    ) -> YearlySummary:
        values = dict(
            year=year,
            temperature_max_avg=temperature_mean_avg + 5,
            temperature_min_avg=temperature_mean_avg - 5,
            temperature_mean_avg=temperature_mean_avg,
            precipitation_total=precipitation_total,
            precipitation_avg=precipitation_total / 365,
            humidity_avg=60.0,
            wind_speed_avg=10.0,
            pressure_avg=1013.0,
            data_points_count=365
        )
        values.update(overrides)
        return YearlySummary(**values)

    return _make

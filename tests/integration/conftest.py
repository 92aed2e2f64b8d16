"""
Fixtures compartilhadas para testes de integração
"""
import pytest
import json
from datetime import date, timedelta
from typing import Dict, Any, Optional
from unittest.mock import AsyncMock, MagicMock

from domain.entities.daily_record import DailyRecord
from domain.entities.historical_weather import HistoricalWeatherSeries
from infrastructure.adapters.cache.memory_result_cache import InMemoryResultCache
from infrastructure.adapters.input import lambda_handler as handler_module
from infrastructure.container import ClimateServiceContainer, set_container


class MockContext:
    """Mock do Lambda Context para testes locais"""
    def __init__(self):
        self.function_name = 'climate-narratives-api'
        self.function_version = '$LATEST'
        self.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:climate-narratives-api'
        self.memory_limit_in_mb = '512'
        self.aws_request_id = 'test-request-id-12345'
        self.log_group_name = '/aws/lambda/climate-narratives-api'
        self.log_stream_name = '2026/10/16/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000  # 30 segundos


@pytest.fixture
def mock_context():
    """Fixture que retorna MockContext para todos os testes"""
    return MockContext()


def build_api_gateway_event(
    method: str,
    path: str,
    resource: str,
    path_parameters: Optional[Dict[str, str]] = None,
    query_parameters: Optional[Dict[str, str]] = None,
    body: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Builder genérico para eventos do API Gateway

    Args:
        method: HTTP method (GET, POST, etc)
        path: Request path (/api/historical/yearly)
        resource: API Gateway resource
        path_parameters: Path params dict
        query_parameters: Query string params dict
        body: Request body dict (will be JSON encoded)
    """
    event = {
        'resource': resource,
        'path': path,
        'httpMethod': method,
        'headers': {
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        },
        'pathParameters': path_parameters,
        'queryStringParameters': query_parameters,
        'requestContext': {'identity': {'sourceIp': '127.0.0.1'}},
        'body': json.dumps(body) if body else None,
        'isBase64Encoded': False
    }
    return event


def build_get_event(path: str, **query: str) -> Dict[str, Any]:
    """
    Builder para GET sem path params

    Example:
        build_get_event('/api/historical/yearly', lat='40.71', lon='-74.01', years='2019,2020')
    """
    return build_api_gateway_event(
        method='GET',
        path=path,
        resource=path,
        query_parameters=query or None
    )


def year_records(year: int, temperature_mean: float, precipitation: float = 2.0):
    day = date(year, 1, 1)
    records = []
    while day.year == year:
        records.append(DailyRecord(
            date=day.isoformat(),
            temperature_max=temperature_mean + 5,
            temperature_min=temperature_mean - 5,
            temperature_mean=temperature_mean,
            precipitation=precipitation
        ))
        day += timedelta(days=1)
    return records


class FakeArchive:
    """
    Archive determinístico: temperatura sobe 0.03°C/ano a partir de 12°C em 1980

    failing_years: anos que levantam a exceção configurada
    """

    def __init__(self):
        self.failing_years = {}
        self.calls = []

    @property
    def provider_name(self) -> str:
        return "FakeArchive"

    async def get_historical_weather(self, coordinates, start_date, end_date):
        self.calls.append((start_date, end_date))
        year = int(start_date[:4])
        if year in self.failing_years:
            raise self.failing_years[year]
        return HistoricalWeatherSeries(
            location=coordinates,
            daily_records=year_records(year, 12.0 + 0.03 * (year - 1980)),
            timezone='America/New_York',
            timezone_abbreviation='EST'
        )


class FakeClimateModel:
    """Climate API determinístico; error (se definido) é levantado em toda chamada"""

    def __init__(self):
        self.error = None
        self.calls = []

    @property
    def provider_name(self) -> str:
        return "FakeClimateModel"

    async def get_daily_projection(self, coordinates, start_date, end_date, model):
        self.calls.append((start_date, model))
        if self.error is not None:
            raise self.error
        year = int(start_date[:4])
        return year_records(year, 15.0 + 0.04 * (year - 2020), precipitation=2.2)


@pytest.fixture
def fake_archive():
    return FakeArchive()


@pytest.fixture
def fake_climate_model():
    return FakeClimateModel()


@pytest.fixture
def container(fake_archive, fake_climate_model):
    """Container com providers falsos instalado como singleton do handler"""
    session_manager = MagicMock()
    session_manager.get_session = AsyncMock()
    session_manager.cleanup = AsyncMock()

    rate_limiter = MagicMock()
    rate_limiter.acquire = AsyncMock()

    test_container = ClimateServiceContainer(
        cache=InMemoryResultCache(enabled=True),
        session_manager=session_manager,
        archive_provider=fake_archive,
        climate_provider=fake_climate_model,
        rate_limiter=rate_limiter
    )
    set_container(test_container)
    try:
        yield test_container
    finally:
        if test_container.started:
            handler_module.run_async(test_container.shutdown())
        set_container(None)

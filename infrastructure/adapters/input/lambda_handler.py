"""
Input Adapter: Lambda Handler HTTP (100% ASYNC)
Presentation Layer: gerencia requisições HTTP e delega para use cases
"""
import asyncio
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.utilities.typing import LambdaContext

# Application Layer - DTOs
from application.dtos.requests import (
    GetHistoricalWeatherRequest,
    GetYearlyClimateRequest,
    GetDecadalClimateRequest,
    GetClimateTrendsRequest,
    GetFutureProjectionsRequest,
    GetProjectionPeriodsRequest
)

# Domain Layer - Exceptions
from domain.exceptions import (
    MissingParameterException,
    InvalidCoordinatesException,
    InvalidYearRangeException,
    InvalidDateRangeException,
    InvalidScenarioException,
    InvalidPeriodException,
    UpstreamServiceException
)

# Infrastructure Layer - Adapters
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from infrastructure.adapters.input.warmup_service import WarmupService
from infrastructure.container import get_container

# Shared Layer - Utilities
from shared.config.settings import CORS_ORIGIN
from shared.utils.validators import (
    GenericValidator,
    CoordinatesValidator,
    YearsValidator,
    DateRangeValidator,
    DecadeRangeValidator,
    TrendRangeValidator,
    ScenarioValidator,
    PeriodsValidator
)
from shared.config.logger_config import get_logger

# Configurar Logger com service name do DD_SERVICE
logger = get_logger()

app = APIGatewayRestResolver(cors=CORSConfig(allow_origin=CORS_ORIGIN))

# =============================
# Global Event Loop (persistente entre invocações Lambda)
# =============================
_global_event_loop = None

# =============================
# Exception Handlers (Delegados para ExceptionHandlerService)
# =============================

exception_service = ExceptionHandlerService()

app.exception_handler(MissingParameterException)(exception_service.handle_missing_parameter)
app.exception_handler(InvalidCoordinatesException)(exception_service.handle_invalid_coordinates)
app.exception_handler(InvalidYearRangeException)(exception_service.handle_invalid_year_range)
app.exception_handler(InvalidDateRangeException)(exception_service.handle_invalid_date_range)
app.exception_handler(InvalidScenarioException)(exception_service.handle_invalid_scenario)
app.exception_handler(InvalidPeriodException)(exception_service.handle_invalid_period)
app.exception_handler(UpstreamServiceException)(exception_service.handle_upstream_error)
app.not_found(exception_service.handle_not_found)
app.exception_handler(ValueError)(exception_service.handle_value_error)
app.exception_handler(Exception)(exception_service.handle_unexpected_error)


def _query() -> dict:
    return app.current_event.query_string_parameters or {}


def _execute(factory_name: str, *args):
    """
    Executa use case do container no loop persistente

    Args:
        factory_name: Método do container que constrói o use case
        *args: Argumentos de execute()
    """
    container = get_container()

    async def execute_async():
        await container.ensure_started()
        use_case = getattr(container, factory_name)()
        return await use_case.execute(*args)

    return run_async(execute_async())


# =============================
# Routes - Historical
# =============================

@app.get("/api/historical/weather")
def get_historical_weather_route():
    """
    GET /api/historical/weather?lat=40.71&lon=-74.01&startDate=2020-01-01&endDate=2020-12-31

    Série diária bruta do archive (máximo 5 anos)
    """
    query = _query()
    GenericValidator.require(query, ["lat", "lon", "startDate", "endDate"])

    coordinates = CoordinatesValidator.validate(query["lat"], query["lon"])
    start_date, end_date = DateRangeValidator.validate(query["startDate"], query["endDate"])

    series = _execute(
        "historical_weather_use_case",
        GetHistoricalWeatherRequest(coordinates=coordinates, start_date=start_date, end_date=end_date)
    )
    return series.to_api_response()


@app.get("/api/historical/yearly")
def get_yearly_climate_route():
    """
    GET /api/historical/yearly?lat=40.71&lon=-74.01&years=2018,2019,2020

    Resumos anuais (máximo 10 anos); anos que falharem aparecem em skippedYears
    """
    query = _query()
    GenericValidator.require(query, ["lat", "lon", "years"])

    coordinates = CoordinatesValidator.validate(query["lat"], query["lon"])
    years = YearsValidator.validate(query["years"])

    response = _execute(
        "yearly_climate_use_case",
        GetYearlyClimateRequest(coordinates=coordinates, years=years)
    )
    return response.to_dict()


@app.get("/api/historical/decades")
def get_decadal_climate_route():
    """
    GET /api/historical/decades?lat=40.71&lon=-74.01&startDecade=1980&endDecade=2010

    Resumos decadais (máximo 5 décadas)
    """
    query = _query()
    GenericValidator.require(query, ["lat", "lon", "startDecade", "endDecade"])

    coordinates = CoordinatesValidator.validate(query["lat"], query["lon"])
    start, end, years = DecadeRangeValidator.validate(query["startDecade"], query["endDecade"])

    response = _execute(
        "decadal_climate_use_case",
        GetDecadalClimateRequest(coordinates=coordinates, start_decade=start, end_decade=end, years=years)
    )
    return response.to_dict()


@app.get("/api/historical/trends")
def get_climate_trends_route():
    """
    GET /api/historical/trends?lat=40.71&lon=-74.01&startYear=1980&endYear=2020

    Tendências lineares (mínimo 10, máximo 50 anos)
    """
    query = _query()
    GenericValidator.require(query, ["lat", "lon", "startYear", "endYear"])

    coordinates = CoordinatesValidator.validate(query["lat"], query["lon"])
    start, end = TrendRangeValidator.validate(query["startYear"], query["endYear"])

    response = _execute(
        "climate_trends_use_case",
        GetClimateTrendsRequest(coordinates=coordinates, start_year=start, end_year=end)
    )
    return response.to_dict()


# =============================
# Routes - Future
# =============================

@app.get("/api/future/projections")
def get_future_projections_route():
    """
    GET /api/future/projections?lat=40.71&lon=-74.01&scenario=moderate
    """
    query = _query()
    GenericValidator.require(query, ["lat", "lon"])

    coordinates = CoordinatesValidator.validate(query["lat"], query["lon"])
    scenario = ScenarioValidator.validate(query.get("scenario"))

    projection = _execute(
        "future_projections_use_case",
        GetFutureProjectionsRequest(coordinates=coordinates, scenario=scenario)
    )
    return projection.to_api_response()


@app.get("/api/future/scenarios")
def get_scenarios_route():
    """
    GET /api/future/scenarios?lat=40.71&lon=-74.01
    """
    query = _query()
    GenericValidator.require(query, ["lat", "lon"])

    coordinates = CoordinatesValidator.validate(query["lat"], query["lon"])

    scenario_set = _execute("compare_scenarios_use_case", coordinates)
    return scenario_set.to_api_response()


@app.get("/api/future/periods")
def get_projection_periods_route():
    """
    GET /api/future/periods?lat=40.71&lon=-74.01&scenario=moderate&periods=2030s,2050s
    """
    query = _query()
    GenericValidator.require(query, ["lat", "lon"])

    coordinates = CoordinatesValidator.validate(query["lat"], query["lon"])
    scenario = ScenarioValidator.validate(query.get("scenario"))
    periods = PeriodsValidator.validate(query.get("periods"))

    response = _execute(
        "projection_periods_use_case",
        GetProjectionPeriodsRequest(coordinates=coordinates, scenario=scenario, periods=periods)
    )
    return response.to_dict()


@app.get("/api/future/summary")
def get_future_summary_route():
    """
    GET /api/future/summary?lat=40.71&lon=-74.01
    """
    query = _query()
    GenericValidator.require(query, ["lat", "lon"])

    coordinates = CoordinatesValidator.validate(query["lat"], query["lon"])

    response = _execute("future_climate_summary_use_case", coordinates)
    return response.to_dict()


# =============================
# Routes - Cache tooling
# =============================

@app.get("/api/cache/stats")
def get_cache_stats_route():
    return get_container().cache_service.stats()


@app.post("/api/cache/clear")
def post_cache_clear_route():
    container = get_container()
    cleared = run_async(container.cache_service.clear())
    return {"cleared": cleared}


# =============================
# Lambda Handler (100% ASYNC)
# =============================

warmup_service = WarmupService(
    logger=logger,
    run_async=lambda coro: run_async(coro),
    get_container=lambda: get_container()
)


@logger.inject_lambda_context()
def lambda_handler(event, context: LambdaContext):
    """
    AWS Lambda main function - 100% ASYNC

    AWS Lambda Powertools manages:
    - REST routing with exception handlers
    - CORS
    - JSON serialization
    - Structured logging

    Datadog APM manages:
    - Distributed tracing

    Available routes:
    - GET  /api/historical/weather?lat&lon&startDate&endDate
    - GET  /api/historical/yearly?lat&lon&years
    - GET  /api/historical/decades?lat&lon&startDecade&endDecade
    - GET  /api/historical/trends?lat&lon&startYear&endYear
    - GET  /api/future/projections?lat&lon&scenario
    - GET  /api/future/scenarios?lat&lon
    - GET  /api/future/periods?lat&lon&scenario&periods
    - GET  /api/future/summary?lat&lon
    - GET  /api/cache/stats
    - POST /api/cache/clear
    """
    warmup_response = warmup_service.handle_warmup_ping(event)
    if warmup_response is not None:
        return warmup_response

    # Extrair IP de origem
    request_context = event.get('requestContext', {}) or {}
    identity = request_context.get('identity', {}) or {}

    logger.info(
        "Requisição Lambda recebida",
        rota=event.get('path', 'N/A'),
        metodo=event.get('httpMethod', 'N/A'),
        request_id=getattr(context, 'aws_request_id', 'N/A'),
        source_ip=identity.get('sourceIp', 'N/A')
    )

    response = app.resolve(event, context)

    # Add CORS headers manually
    if 'headers' not in response or response['headers'] is None:
        response['headers'] = {}

    response['headers']['Access-Control-Allow-Origin'] = CORS_ORIGIN
    response['headers']['Access-Control-Allow-Headers'] = 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token,X-Requested-With'
    response['headers']['Access-Control-Allow-Methods'] = 'GET,POST,OPTIONS'
    response['headers']['Access-Control-Max-Age'] = '86400'

    status_code = response.get('statusCode', 'N/A')
    logger.info(
        "Requisição Lambda concluída",
        status_code=status_code,
        sucesso=status_code == 200
    )

    return response


def get_or_create_event_loop():
    """
    Retorna event loop global persistente

    Benefícios:
    - Reutiliza event loop entre invocações Lambda (warm starts)
    - Sessão aiohttp e varredura do cache permanecem válidas
    """
    global _global_event_loop

    # Se loop existe e não está fechado, reutilizar
    if _global_event_loop is not None and not _global_event_loop.is_closed():
        return _global_event_loop

    # Criar novo loop se necessário
    _global_event_loop = asyncio.new_event_loop()
    asyncio.set_event_loop(_global_event_loop)

    return _global_event_loop


def run_async(coro):
    """
    Executa coroutine no event loop global (NÃO fecha o loop)

    Args:
        coro: Coroutine a ser executada

    Returns:
        Resultado da coroutine
    """
    loop = get_or_create_event_loop()
    return loop.run_until_complete(coro)

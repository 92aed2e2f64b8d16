"""
Domain Constants - constantes de clima, cenários e cache centralizadas
"""


class API:
    """Constantes das APIs Open-Meteo"""

    ARCHIVE_DAILY_VARIABLES = [
        'temperature_2m_max',
        'temperature_2m_min',
        'temperature_2m_mean',
        'precipitation_sum',
        'relative_humidity_2m_mean',
        'wind_speed_10m_mean',
        'surface_pressure_mean'
    ]

    CLIMATE_DAILY_VARIABLES = [
        'temperature_2m_max',
        'temperature_2m_min',
        'temperature_2m_mean',
        'precipitation_sum'
    ]

    ARCHIVE_TIMEZONE = 'auto'

    # Status que justificam retry no climate API
    RETRYABLE_STATUS = (429, 503)


class Cache:
    """Constantes de cache"""

    # TTLs por tipo de dado (segundos)
    TTL_HISTORICAL_DAILY = 24 * 60 * 60  # dados diários históricos são estáticos
    TTL_HISTORICAL_YEARLY = 7 * 24 * 60 * 60
    TTL_CLIMATE_TRENDS = 30 * 24 * 60 * 60  # regressão é cara
    TTL_FUTURE_PROJECTIONS = 7 * 24 * 60 * 60

    # Prefixos de chave
    PREFIX_HISTORICAL_DAILY = "historical-daily"
    PREFIX_HISTORICAL = "historical"
    PREFIX_DECADAL = "decadal"
    PREFIX_TRENDS = "trends"
    PREFIX_FUTURE_PROJECTIONS = "future-projections"
    PREFIX_ALL_SCENARIOS = "all-scenarios"

    # 2 casas decimais ~ 1.1 km
    COORDINATE_PRECISION = 2


class Climate:
    """Limites do pipeline histórico e da análise de tendência"""

    MIN_YEAR = 1940
    MIN_DATE = '1940-01-01'
    ARCHIVE_DELAY_DAYS = 2  # archive tem atraso de 2 dias

    MAX_YEARS_PER_REQUEST = 10
    MAX_HISTORICAL_RANGE_DAYS = 1825  # ~5 anos
    MAX_DECADAL_YEARS = 50
    MAX_TREND_YEARS = 50
    MIN_TREND_SPAN_YEARS = 10

    MIN_TREND_POINTS = 10  # piso de significância estatística
    TREND_STABLE_THRESHOLD = 0.01

    METRIC_TEMPERATURE_MEAN = 'temperature_mean'
    METRIC_PRECIPITATION_ANNUAL = 'precipitation_annual'


class Projection:
    """Tabelas do motor de projeção por cenário"""

    SCENARIO_MODELS = {
        'optimistic': 'CMCC_CM2_VHR4',  # menor aquecimento
        'moderate': 'MPI_ESM1_2_HR',
        'pessimistic': 'EC_Earth3P_HR'  # maior aquecimento
    }

    SCENARIO_MULTIPLIERS = {
        'optimistic': 0.6,
        'moderate': 1.0,
        'pessimistic': 1.4
    }

    # Spread entre modelos: temperatura em °C, precipitação em %
    UNCERTAINTY_FACTORS = {
        'optimistic': {'temperature': 0.5, 'precipitation': 10.0},
        'moderate': {'temperature': 0.8, 'precipitation': 15.0},
        'pessimistic': {'temperature': 1.2, 'precipitation': 20.0}
    }

    PERIOD_RANGES = {
        '2020s': (2020, 2029),
        '2030s': (2030, 2039),
        '2040s': (2040, 2049),
        '2050s': (2050, 2059)
    }
    DEFAULT_FILTER_PERIODS = ['2030s', '2040s', '2050s']

    BASELINE_PERIOD = '1990-2020'
    BASELINE_TEMPERATURE_MEAN = 15.0
    BASELINE_PRECIPITATION = 800.0

    # Extrapolação além da cobertura dos modelos
    EXTRAPOLATION_REFERENCE_YEAR = 2020
    WARMING_PER_DECADE = 0.8  # °C
    PRECIPITATION_CHANGE_PER_DECADE = 5.0  # %
    EXTRAPOLATED_TEMPERATURE_SPREAD = 5.0  # max/min = média ± 5
    DAYS_PER_YEAR = 365

    DATA_SOURCE_REAL = 'Open-Meteo Climate API (CMIP6)'
    CONFIDENCE_REAL = 'Medium-High (CMIP6 multi-model ensemble)'


class SyntheticProjection:
    """Parâmetros do conjunto sintético usado quando o climate API falha"""

    SCENARIO_BASES = {
        'optimistic': {'temperature': 16.5, 'precipitation': 850.0},
        'moderate': {'temperature': 17.2, 'precipitation': 820.0},
        'pessimistic': {'temperature': 18.8, 'precipitation': 780.0}
    }

    REFERENCE_YEAR = 2025
    WARMING_PER_YEAR = 0.06  # 0.6°C por década
    PRECIPITATION_PER_YEAR = 0.5  # mm
    MAX_OFFSET = 6.0
    MIN_OFFSET = -4.0

    BASELINE_TEMPERATURE_MEAN = 15.2
    BASELINE_PRECIPITATION = 845.0

    DATA_SOURCE = 'Mock Climate Projections (Development)'
    CONFIDENCE = 'Mock Data - For Development Only'

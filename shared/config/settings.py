"""
Configurações centralizadas da aplicação
"""
import os

# Open-Meteo (não requer chave)
OPENMETEO_ARCHIVE_URL = os.environ.get(
    'OPENMETEO_ARCHIVE_URL', 'https://archive-api.open-meteo.com/v1/archive'
)
OPENMETEO_CLIMATE_URL = os.environ.get(
    'OPENMETEO_CLIMATE_URL', 'https://climate-api.open-meteo.com/v1/climate'
)

# HTTP (segundos)
HTTP_ARCHIVE_TIMEOUT = float(os.environ.get('HTTP_ARCHIVE_TIMEOUT', '10'))
HTTP_CLIMATE_TIMEOUT = float(os.environ.get('HTTP_CLIMATE_TIMEOUT', '15'))
HTTP_CONNECT_TIMEOUT = float(os.environ.get('HTTP_CONNECT_TIMEOUT', '5'))

# Pacing entre anos (cota diária do archive: ~10.000 chamadas)
YEAR_FETCH_INTERVAL_SECONDS = float(os.environ.get('YEAR_FETCH_INTERVAL_SECONDS', '2.0'))

# Tentativas totais no climate API (retry em 429/503/timeout)
CLIMATE_MODEL_RETRY_ATTEMPTS = int(os.environ.get('CLIMATE_MODEL_RETRY_ATTEMPTS', '2'))

# Cache em memória (segundos)
CACHE_ENABLED = os.environ.get('CACHE_ENABLED', 'true').lower() in ('true', '1', 'yes')
CACHE_SWEEP_INTERVAL_SECONDS = float(os.environ.get('CACHE_SWEEP_INTERVAL_SECONDS', '1800'))
CACHE_DEFAULT_TTL_SECONDS = int(os.environ.get('CACHE_DEFAULT_TTL_SECONDS', '3600'))

# Último ano coberto pelos modelos CMIP6 do climate API
CLIMATE_MODEL_COVERAGE_END_YEAR = int(os.environ.get('CLIMATE_MODEL_COVERAGE_END_YEAR', '2050'))

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')

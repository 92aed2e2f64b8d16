"""
OpenMeteo Daily Mapper - Transforma séries diárias (arrays paralelos) em entities
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
import math
from typing import Any, Dict, List, Optional, Sequence

from domain.entities.daily_record import DailyRecord
from domain.entities.historical_weather import HistoricalWeatherSeries
from domain.exceptions import UpstreamPayloadException
from domain.value_objects.coordinates import Coordinates


def _value_at(series: Optional[Sequence[Any]], index: int) -> Optional[float]:
    """
    Valor do índice ou None (array ausente, curto, null ou NaN)

    0.0 é valor real, nunca tratado como ausente.

    Raises:
        UpstreamPayloadException: Se o valor não for numérico
    """
    if series is None or index >= len(series):
        return None
    value = series[index]
    if value is None:
        return None
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise UpstreamPayloadException(
            "Invalid response format from Open-Meteo: non-numeric daily value",
            details={"index": index, "value": str(value)}
        )
    if math.isnan(value):
        return None
    return value


class OpenMeteoDailyMapper:
    """
    Mapper para respostas daily do archive e do climate API

    Responsabilidade: Traduzir formato Open-Meteo → Domain entities
    Localização: Infrastructure (conhece detalhes da API externa)
    """

    @staticmethod
    def map_daily_records(data: Dict[str, Any]) -> List[DailyRecord]:
        """
        Mapeia o bloco daily (arrays paralelos indexados por time)

        Args:
            data: Resposta raw da API Open-Meteo

        Returns:
            Lista de DailyRecord, um por data

        Raises:
            UpstreamPayloadException: Se daily ou daily.time estiver ausente
        """
        daily = data.get('daily') if isinstance(data, dict) else None
        if not daily or daily.get('time') is None:
            raise UpstreamPayloadException(
                "Invalid response format from Open-Meteo: missing daily data",
                details={"keys": sorted(data.keys()) if isinstance(data, dict) else []}
            )

        dates = daily['time']
        temp_max = daily.get('temperature_2m_max')
        temp_min = daily.get('temperature_2m_min')
        temp_mean = daily.get('temperature_2m_mean')
        precipitation = daily.get('precipitation_sum')
        humidity = daily.get('relative_humidity_2m_mean')
        wind_speed = daily.get('wind_speed_10m_mean')
        pressure = daily.get('surface_pressure_mean')

        records = []
        for i, date in enumerate(dates):
            precip = _value_at(precipitation, i)
            records.append(DailyRecord(
                date=date,
                temperature_max=_value_at(temp_max, i),
                temperature_min=_value_at(temp_min, i),
                temperature_mean=_value_at(temp_mean, i),
                precipitation=precip if precip is not None else 0.0,
                humidity=_value_at(humidity, i),
                wind_speed=_value_at(wind_speed, i),
                pressure=_value_at(pressure, i)
            ))
        return records

    @staticmethod
    def map_historical_series(data: Dict[str, Any], coordinates: Coordinates) -> HistoricalWeatherSeries:
        """
        Mapeia resposta do archive com metadados da grade

        Args:
            data: Resposta raw do archive
            coordinates: Localização solicitada (não a célula da grade)

        Returns:
            HistoricalWeatherSeries
        """
        records = OpenMeteoDailyMapper.map_daily_records(data)
        return HistoricalWeatherSeries(
            location=coordinates,
            daily_records=records,
            timezone=data.get('timezone', 'UTC'),
            timezone_abbreviation=data.get('timezone_abbreviation', 'UTC'),
            elevation=float(data.get('elevation') or 0.0),
            generation_time_ms=float(data.get('generationtime_ms') or 0.0)
        )

"""
Rate-Limited Year Fetcher
Busca um ano por vez no archive, respeitando o pacing entre chamadas
"""
from typing import Sequence
from ddtrace import tracer

from application.ports.output.climate_archive_port import IClimateArchiveProvider
from application.ports.output.rate_limiter_port import IRateLimiter
from domain.entities.yearly_summary import YearlySummary
from domain.exceptions import UpstreamServiceException
from domain.services.yearly_aggregator import YearlyAggregator
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.partial_result import PartialResult
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

REASON_NO_VALID_DAYS = "no valid days"


class YearlyClimateFetcher:
    """
    Busca sequencial de anos com resultado parcial

    - Um permit do rate limiter antes de cada chamada ao upstream
    - Uma chamada por ano (YYYY-01-01 a YYYY-12-31)
    - Falha de um ano vira item pulado com motivo; os demais continuam
    - Ordem de saída = ordem de entrada
    """

    def __init__(
        self,
        archive_provider: IClimateArchiveProvider,
        rate_limiter: IRateLimiter
    ):
        self.archive_provider = archive_provider
        self.rate_limiter = rate_limiter

    @tracer.wrap(resource="service.yearly_climate_fetcher")
    async def fetch_years(
        self,
        coordinates: Coordinates,
        years: Sequence[int]
    ) -> PartialResult[YearlySummary]:
        """
        Busca e agrega cada ano solicitado

        Args:
            coordinates: Localização
            years: Anos na ordem desejada (sem limite aqui; a rota limita)

        Returns:
            PartialResult com resumos obtidos e anos pulados
        """
        result: PartialResult[YearlySummary] = PartialResult()
        total = len(years)

        logger.info(
            "Iniciando busca anual",
            location=str(coordinates),
            total_years=total,
            first_year=years[0] if years else None,
            last_year=years[-1] if years else None
        )

        for index, year in enumerate(years, start=1):
            await self.rate_limiter.acquire()
            logger.debug("Processando ano", year=year, progress=f"{index}/{total}")

            try:
                series = await self.archive_provider.get_historical_weather(
                    coordinates,
                    start_date=f"{year}-01-01",
                    end_date=f"{year}-12-31"
                )
            except UpstreamServiceException as e:
                logger.warning("Falha ao buscar ano", year=year, error=str(e), details=e.details)
                result.skip(year, f"fetch failed: {e.message}")
                continue
            except Exception as e:
                logger.warning("Erro inesperado ao buscar ano", year=year, error=str(e), exc_info=True)
                result.skip(year, f"fetch failed: {e}")
                continue

            summary = YearlyAggregator.aggregate_year(year, series.daily_records)
            if summary is None:
                logger.warning("Ano sem dias válidos", year=year, records=len(series.daily_records))
                result.skip(year, REASON_NO_VALID_DAYS)
                continue

            result.add(summary)

        logger.info(
            "Busca anual concluída",
            retrieved=len(result.items),
            skipped=result.skipped_identifiers,
            complete=result.is_complete
        )
        return result


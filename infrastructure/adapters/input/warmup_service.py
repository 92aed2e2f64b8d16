"""
Warm-up service to prepare dependencies and short-circuit scheduled pings.
"""
import json
from typing import Callable, Optional, Any

from ddtrace import tracer


class WarmupService:
    def __init__(
        self,
        *,
        logger,
        run_async: Callable[[Any], Any],
        get_container: Callable[[], Any],
    ):
        self.logger = logger
        self.run_async = run_async
        self.get_container = get_container

    @tracer.wrap(resource="warmup.init")
    def warmup_init(self) -> bool:
        """Prepara sessão HTTP e varredura do cache para reuso em warm starts."""
        container = self.get_container()

        async def preload_async():
            await container.ensure_started()
            await container.session_manager.get_session()

        try:
            self.run_async(preload_async())
        except Exception as exc:  # pragma: no cover - best-effort
            self.logger.warning("Warm-up init async step failed", error=str(exc))
            return False
        return True

    @tracer.wrap(resource="warmup.handle_ping")
    def handle_warmup_ping(self, event: Optional[dict]):
        """
        Warm-up short-circuit para pings agendados (EventBridge/cron).
        """
        if not isinstance(event, dict):
            return None

        if not (event.get("warmup") or event.get("source") == "aws.events"):
            return None

        self.logger.info("Warm-up ping recebido")
        ready = self.warmup_init()
        return {
            "statusCode": 200,
            "headers": {
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": "*",
            },
            "body": json.dumps({"ok": ready, "warmup": True})
        }

"""Service health reporting."""
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from storefront.db.repositories.health import HealthRepository
from storefront.errors import DomainError

logger = logging.getLogger(__name__)


class HealthService:
    def __init__(self, repository: HealthRepository):
        self.repository = repository

    def check_health(self) -> Dict[str, Any]:
        try:
            latency = self.repository.check_database_connection()
        except DomainError as exc:
            logger.error("Database health check failed: %s", exc.message)
            raise DomainError(f"Database health check failed: {exc.message}") from exc
        return {
            "status": "ok",
            "database": {"connected": True, "latency": latency},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

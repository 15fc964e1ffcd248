from __future__ import annotations

import uuid
from typing import Any

from uber_service.config import Settings
from uber_service.db.session import Database
from uber_service.models.schemas import UberResponse


class UberService:
    """Owns the collaborators built at startup and answers requests.

    Collaborators are passed in explicitly. `logger` only needs `info`;
    any structlog bound logger fits.
    """

    def __init__(self, settings: Settings, database: Database, logger: Any) -> None:
        self.settings = settings
        self.database = database
        self.logger = logger

    def start(self) -> None:
        self.logger.info("Starting Uber service", service=self.settings.service_name)
        self._log_components()

    def _log_components(self) -> None:
        settings = self.settings
        self.logger.info(
            "Uber components initialized",
            config={
                "service_name": settings.service_name,
                "environment": settings.environment,
                "region": settings.region,
            },
            database=self.database.describe(),
            logging={"level": settings.log_level, "format": settings.log_format},
        )

    def stop(self) -> None:
        self.logger.info("Stopping Uber service", service=self.settings.service_name)
        self.database.close()

    def handle(self, method: str, path: str) -> UberResponse:
        request_id = str(uuid.uuid4())
        self.logger.info(
            "Processing Uber request",
            request_id=request_id,
            method=method,
            path=path,
        )
        return UberResponse(request_id=request_id)

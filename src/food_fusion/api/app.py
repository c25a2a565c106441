"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request

from food_fusion.api.models import PortionedItemPayload, ScanRequest, ScanResponse
from food_fusion.app_logging import configure_logging
from food_fusion.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/scan/portions")
    def scan_portions(payload: ScanRequest, request: Request) -> ScanResponse:
        """Fuse detector outputs and return portioned items."""
        state_container: AppContainer = request.app.state.container
        result = state_container.scan_service.analyze(
            [detection.to_domain() for detection in payload.vision],
            payload.text,
            plate_bbox=payload.plate_bbox.to_domain() if payload.plate_bbox else None,
            image_size=payload.image_size.to_domain() if payload.image_size else None,
        )
        if result.rejected:
            logger.info("Rejected non-food detections: %s", result.rejected)
        return ScanResponse(
            items=[PortionedItemPayload.from_domain(item) for item in result.items],
            total_grams=result.total_grams,
            rejected=result.rejected,
        )

    return app

"""
FastAPI application served through the Lambda HTTP proxy.

Every request is tagged with the client's device classification so
rendering and analytics code can read it from request.state.
"""
from typing import Optional

from fastapi import Depends, FastAPI, Request
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from device_detector import DeviceDetector, DeviceInfo
from logger_config import get_logger
from services.metrics_service import MetricsService

logger = get_logger(__name__)


class DeviceDetectionMiddleware(BaseHTTPMiddleware):
    """Attach a DeviceInfo for the User-Agent header to request.state.device."""

    def __init__(
        self,
        app: ASGIApp,
        detector: DeviceDetector,
        metrics: Optional[MetricsService] = None
    ):
        super().__init__(app)
        self.detector = detector
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next):
        device_info = self.detector.detect_device(request.headers.get("user-agent"))
        request.state.device = device_info

        if self.metrics is not None:
            await run_in_threadpool(self.metrics.record_device, device_info)

        return await call_next(request)


def get_device(request: Request) -> DeviceInfo:
    """Dependency returning the device attached by DeviceDetectionMiddleware."""
    return request.state.device


def create_app(
    detector: Optional[DeviceDetector] = None,
    metrics: Optional[MetricsService] = None
) -> FastAPI:
    app = FastAPI(title="Shiba")
    app.add_middleware(
        DeviceDetectionMiddleware,
        detector=detector or DeviceDetector(),
        metrics=metrics,
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/api/device")
    def device(device_info: DeviceInfo = Depends(get_device)):
        return device_info.to_dict()

    return app

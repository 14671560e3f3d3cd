"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from debt_tracker.api.middleware import RequestIDMiddleware, MetricsMiddleware
from debt_tracker.api.v1 import accounts, history, payments, report
from debt_tracker.infrastructure.database.models import Base
from debt_tracker.infrastructure.database.session import engine
from debt_tracker.infrastructure.observability.logging import setup_logging
from debt_tracker.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create the configuration tables on first start
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Debt Tracker",
        description="Debt repayment schedule tracking against a budgeting ledger",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(accounts.router, prefix="/v1", tags=["accounts"])
    app.include_router(report.router, prefix="/v1", tags=["reports"])
    app.include_router(history.router, prefix="/v1", tags=["history"])
    app.include_router(payments.router, prefix="/v1", tags=["payments"])

    return app


app = create_app()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from salestrack.config import Settings, get_settings
from salestrack.core.errors import ServiceError
from salestrack.core.logging import setup_logging
from salestrack.database import init_db
from salestrack.routers import account_router, health_router, reports_router, sales_router

logger = logging.getLogger(__name__)

setup_logging()
settings: Settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    logger.info("Application started successfully.")
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)


@app.exception_handler(ServiceError)
async def service_error_handler(_request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Something went wrong handling %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "message": "Internal Server Error",
            "detailed": str(exc),
        },
    )


app.include_router(health_router)
app.include_router(account_router)
app.include_router(sales_router)
app.include_router(reports_router)


__all__ = ["app"]

import logging

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import get_settings
from .exceptions import CalcError
from .middleware import MaxBodySizeMiddleware
from .dispatch import router as calc_router
from .dispatch import error_body

settings = get_settings()


def configure_logging(level: str) -> None:
    """Install structlog with a level filter taken from settings."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
    )


configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG
)
app.add_middleware(MaxBodySizeMiddleware, max_body_size=settings.MAX_BODY_BYTES)


# Global exception handlers
@app.exception_handler(CalcError)
async def calc_exception_handler(request: Request, exc: CalcError):
    return JSONResponse(
        status_code=exc.status,
        content=error_body(exc)
    )

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}

# Include routers
app.include_router(calc_router)

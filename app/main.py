import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.clinical.cdt.reference import get_reference_table
from app.clinical.cdt.router import router as cdt_router
from app.clinical.decision_support.router import router as decision_support_router
from app.clinical.notes.router import router as notes_router
from app.clinical.terminology.router import router as terminology_router
from app.core.config import settings
from app.core.errors import InvalidArgumentError
from app.routers import health

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)
APP_VERSION = "0.1.0"

origins = settings.CORS_ORIGINS

app = FastAPI(
    title=f"{settings.PROJECT_NAME} API",
    description="CDT code suggestions and note post-processing for DentalAI Assistant",
    version=APP_VERSION,
)

# CORS must be registered before the routers so preflight requests from the frontend succeed
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_app_version_header(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-App-Version"] = APP_VERSION
    return response


@app.exception_handler(InvalidArgumentError)
def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(Exception)
def global_exception_handler(request: Request, exc: Exception):
    """Unhandled errors become a 500 that still carries CORS headers, so the frontend sees the error."""
    if isinstance(exc, HTTPException):
        raise exc
    logger.exception("Unhandled exception: %s", exc)
    origin = request.headers.get("origin", "")
    cors_headers = {}
    if origin in origins:
        cors_headers["Access-Control-Allow-Origin"] = origin
        cors_headers["Access-Control-Allow-Credentials"] = "true"
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
        headers=cors_headers,
    )


app.include_router(health.router, tags=["health"])
app.include_router(cdt_router)
app.include_router(notes_router)
app.include_router(decision_support_router)
app.include_router(terminology_router)


@app.on_event("startup")
def on_startup() -> None:
    logger.info("App version: %s", APP_VERSION)
    # Fail at startup, not on the first request, when the reference table is missing or malformed
    table = get_reference_table()
    logger.info("CDT reference table ready (%d codes, source=%s)", len(table), settings.CDT_SOURCE)

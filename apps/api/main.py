from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.api.core.config import settings
from apps.api.core.db import run_migrations
from apps.api.core.logging import get_logger

# Routers
from apps.api.routes import companies, invoices, system

logger = get_logger(__name__)

app = FastAPI(
    title="BizTime API",
    version="1.0.0",
)

# ==========================
# CORS
# ==========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==========================
# Error responses
# ==========================
def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"status": status_code, "message": message}},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


def _describe_validation_errors(errors) -> str:
    # "body.amt: Input should be a valid number; path.invoice_id: ..."
    parts = []
    for err in errors:
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        _describe_validation_errors(exc.errors()),
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    # Duplicate codes, unknown comp_code and missing fields all land here
    logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


# ==========================
# Startup Event
# ==========================
@app.on_event("startup")
def startup_event():
    run_migrations()
    logger.info("✓ Database initialized")
    logger.info("✓ BizTime API is running")


# ==========================
# Routers
# ==========================
app.include_router(system.router, prefix="/system", tags=["system"])
app.include_router(companies.router, prefix="/companies", tags=["companies"])
app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])


# ==========================
# Root Endpoint
# ==========================
@app.get("/")
def root():
    return {
        "service": "biztime-api",
        "status": "running",
        "endpoints": {
            "system": "/system/health",
            "companies": "/companies",
            "invoices": "/invoices",
        },
    }

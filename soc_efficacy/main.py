from datetime import datetime, timezone

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from soc_efficacy.config import get_settings
from soc_efficacy.core.exceptions import InputValidationException, UnknownDomainException
from soc_efficacy.logging_config import setup_logging
from soc_efficacy.models.responses import ErrorResponse

# IMPORT ROUTERS
from soc_efficacy.routers.health import router as health_router
from soc_efficacy.routers.soc_scoring import router as soc_scoring_router

load_dotenv()
setup_logging()

settings = get_settings()

# SWAGGER UI — tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "health"},
    {"name": "SOC Efficacy Scoring"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


# EXCEPTION HANDLERS
async def input_validation_exception_handler(request: Request, exc: InputValidationException):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error_code="ASSESSMENT_INPUT_INVALID",
            message="Assessment input failed validation",
            details={"errors": exc.errors},
            timestamp=datetime.now(timezone.utc),
        ).model_dump(mode="json"),
    )


async def unknown_domain_exception_handler(request: Request, exc: UnknownDomainException):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error_code="UNKNOWN_DOMAIN",
            message=str(exc),
            details={"domain": exc.domain},
            timestamp=datetime.now(timezone.utc),
        ).model_dump(mode="json"),
    )


app.add_exception_handler(InputValidationException, input_validation_exception_handler)
app.add_exception_handler(UnknownDomainException, unknown_domain_exception_handler)

# REGISTER ROUTERS
app.include_router(health_router)
app.include_router(soc_scoring_router)


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "soc_efficacy.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )

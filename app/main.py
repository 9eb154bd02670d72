import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.routes import auth, collections, riddles
from app.db.base import Base
from app.db.sessions import engine
from app.core.config import settings
from app.core.errors import ActionError, BadRequestError

# Import all models to ensure they're registered with Base
import app.models

if not logging.getLogger().handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("app.main")

# Create tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Create, store, and categorize riddles in personal collections"
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router)
app.include_router(collections.router)
app.include_router(riddles.router)


@app.exception_handler(ActionError)
async def action_error_handler(request: Request, exc: ActionError):
    """Render typed action errors as `{success: false, error: {...}}`."""
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject malformed input before any handler logic runs."""
    error = BadRequestError("Invalid input.", details=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.on_event("startup")
async def startup_event():
    logger.info("%s v%s starting", settings.APP_NAME, settings.APP_VERSION)
    logger.info("Database connected")
    logger.info("JWT authentication enabled")


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

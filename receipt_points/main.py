"""
Receipt points service — FastAPI application entry-point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from receipt_points.config import settings
from receipt_points.database import Base, engine
from receipt_points.errors import (
    ReceiptNotFoundError,
    ReceiptValidationError,
    receipt_not_found_handler,
    receipt_validation_handler,
    request_validation_handler,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Import models so Base.metadata knows about them
    import receipt_points.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Score store ready (%s)", settings.DATABASE_URL)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Receipt Points",
    description="Receipt → validation → reward points",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ReceiptValidationError, receipt_validation_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(ReceiptNotFoundError, receipt_not_found_handler)


@app.get("/")
async def root():
    return {
        "service": "Receipt Points",
        "version": "0.1.0",
        "environment": settings.ENVIRONMENT,
        "status": "Receipt API is running!",
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API router ──────────────────────────────────────────────────
from receipt_points.routers.receipts import router as receipts_router  # noqa: E402

app.include_router(receipts_router, tags=["Receipts"])


if __name__ == "__main__":
    import uvicorn

    logger.info("Receipt points server running on port %d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

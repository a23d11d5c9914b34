"""
Receipt Points — FastAPI application entry-point.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.errors import invalid_receipt_handler
from app.pipeline.store import build_store

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one store per process, shared by all request handlers
    if settings.RECEIPT_STORE.lower() == "sql":
        os.makedirs(settings.DATA_DIR, exist_ok=True)
    app.state.store = build_store(settings)
    logger.info("Receipt store ready (%s)", settings.RECEIPT_STORE)
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Receipt Points",
    description="Receipt → content-derived id → points",
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

app.add_exception_handler(RequestValidationError, invalid_receipt_handler)


@app.get("/")
async def root():
    return {"service": "Receipt Points", "version": "0.1.0", "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API router ──────────────────────────────────────────────────
from app.routers.receipts import router as receipts_router  # noqa: E402

app.include_router(receipts_router, tags=["Receipts"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)

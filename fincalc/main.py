"""FastAPI application entry point.

Serves the income-tax, salary and retirement-benefit calculators.

Usage:
    uvicorn fincalc.main:app --host 0.0.0.0 --port 8000 --reload
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fincalc.config import settings
from fincalc.routers import retirement, salary, tax
from fincalc.services.tax_service import InvalidInputError

# ── Logging ──────────────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan (startup + shutdown) ────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Indian finance calculators API on port %s …", settings.APP_PORT)
    yield
    logger.info("Application shutdown complete.")


# ── Application factory ──────────────────────────────────────────────────

app = FastAPI(
    title="Indian Finance Calculators API",
    description=(
        "FY 2024-25 income tax under the old and new regimes (slabs, 87A "
        "rebate, marginal relief, surcharge, cess), regime comparison, "
        "in-hand salary and offer comparison, gratuity and leave encashment."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS ────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request-level timing middleware ──────────────────────────────────────

@app.middleware("http")
async def timing_middleware(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"
    logger.debug("%s %s took %.2f ms", request.method, request.url.path, elapsed_ms)
    return response


# ── Exception handlers ───────────────────────────────────────────────────

@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    logger.warning("Rejected input on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. Please check the logs."},
    )


# ── Register routers ─────────────────────────────────────────────────────
app.include_router(tax.router)
app.include_router(salary.router)
app.include_router(retirement.router)


# ── Health check ──────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy", "port": settings.APP_PORT}


# ── Dev entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fincalc.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=True,
    )

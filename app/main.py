from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from app.core.config import settings
from app.routers import activity, health, reports, transactions
from app.utils.loader import load_analyzer
from app.utils.scheduler import start_scheduler, stop_scheduler

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: load transactions, optionally start polling
    logger.info(f"Loading transactions from {settings.TRANSACTIONS_JSON}...")
    app.state.analyzer = load_analyzer(settings.TRANSACTIONS_JSON)
    if settings.ACTIVITY_POLL_ENABLED:
        logger.info("Starting activity scheduler...")
        start_scheduler(
            settings.ACTIVITY_API_URL,
            interval_seconds=settings.ACTIVITY_POLL_SECONDS,
            timeout=settings.ACTIVITY_REQUEST_TIMEOUT,
        )
    yield
    # Shutdown: stop polling if it was started at any point
    if stop_scheduler():
        logger.info("Activity scheduler stopped on shutdown")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan
)


# Root endpoint
@app.get("/")
def root():
    return {"message": f"Welcome to {settings.PROJECT_NAME} API"}


# Register routers
app.include_router(health.router, prefix=f"{settings.API_PREFIX}", tags=["Health"])  # /api/health
app.include_router(transactions.router, prefix=f"{settings.API_PREFIX}/transactions", tags=["Transactions"])
app.include_router(reports.router, prefix=f"{settings.API_PREFIX}/reports", tags=["Reports"])
app.include_router(activity.router, prefix=f"{settings.API_PREFIX}/activity", tags=["Activity"])

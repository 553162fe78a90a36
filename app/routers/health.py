"""
Health Check Router
Simple health check endpoint
"""
from datetime import datetime

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.deps import get_analyzer
from app.utils.analyzer import TransactionAnalyzer
from app.utils.scheduler import get_scheduler_status

router = APIRouter()


@router.get("/health")
def health_check(analyzer: TransactionAnalyzer = Depends(get_analyzer)):
    """
    Health check endpoint.
    Returns API status, loaded transaction count and poller state.
    """
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "transactions_loaded": len(analyzer),
        "activity_polling": get_scheduler_status()["running"],
        "timestamp": datetime.utcnow().isoformat()
    }

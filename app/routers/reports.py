import logging
from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from app.core.deps import get_analyzer
from app.utils import pdf_report
from app.utils.analyzer import TransactionAnalyzer

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/summary")
def get_summary(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Dict:
    return analyzer.summary()


@router.get("/total")
def get_total_amount(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Dict:
    return {"total_amount": analyzer.total_amount()}


@router.get("/average")
def get_average_amount(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Dict:
    """average_amount is null when there are no transactions."""
    return {"average_amount": analyzer.average_amount()}


@router.get("/total-debit")
def get_total_debit(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Dict:
    return {"total_debit": analyzer.total_debit()}


@router.get("/most-transactions-month")
def get_most_transactions_month(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Dict:
    return {"month": analyzer.most_transactions_month()}


@router.get("/most-debit-month")
def get_most_debit_month(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Dict:
    return {"month": analyzer.most_debit_month()}


@router.get("/dominant-type")
def get_dominant_type(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Dict:
    return {"dominant_type": analyzer.dominant_type()}


@router.get("/total-by-date")
def get_total_by_date(
    year: Optional[int] = None,
    month: Optional[int] = Query(default=None, ge=1, le=12),
    day: Optional[int] = Query(default=None, ge=1, le=31),
    analyzer: TransactionAnalyzer = Depends(get_analyzer),
) -> Dict:
    """
    Sum of amounts for the given calendar date parts. Each part is optional;
    month is 1-12.
    """
    return {
        "year": year,
        "month": month,
        "day": day,
        "total_amount": analyzer.total_amount_by_date(year=year, month=month, day=day),
    }


@router.get("/csv")
def download_csv(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Response:
    content = pdf_report.generate_csv(analyzer.all_transactions())
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="transactions.csv"'},
    )


@router.get("/pdf")
def download_pdf(analyzer: TransactionAnalyzer = Depends(get_analyzer)) -> Response:
    try:
        content = pdf_report.generate_pdf(analyzer.summary())
    except Exception as e:
        logger.error(f"Error generating PDF report: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error generating PDF report: {str(e)}")

    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="transaction_summary.pdf"'},
    )

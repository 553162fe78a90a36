from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.deps import get_analyzer
from app.models.transaction import TransactionCreate, TransactionPublic
from app.utils.analyzer import TransactionAnalyzer

router = APIRouter()


def _to_public(transactions) -> List[Dict]:
    return [t.to_dict() for t in transactions]


@router.get("/")
def list_transactions(analyzer: TransactionAnalyzer = Depends(get_analyzer)):
    return _to_public(analyzer.all_transactions())


@router.post("/", response_model=TransactionPublic, status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction: TransactionCreate,
    analyzer: TransactionAnalyzer = Depends(get_analyzer),
):
    created = analyzer.add_transaction(transaction.model_dump())
    return TransactionPublic(**created.to_dict())


@router.get("/types")
def list_unique_types(analyzer: TransactionAnalyzer = Depends(get_analyzer)):
    return {"types": analyzer.unique_types()}


@router.get("/descriptions")
def list_descriptions(analyzer: TransactionAnalyzer = Depends(get_analyzer)):
    return {"descriptions": analyzer.descriptions()}


@router.get("/by-type/{kind}")
def list_by_type(kind: str, analyzer: TransactionAnalyzer = Depends(get_analyzer)):
    return _to_public(analyzer.by_type(kind))


@router.get("/by-merchant/{merchant}")
def list_by_merchant(merchant: str, analyzer: TransactionAnalyzer = Depends(get_analyzer)):
    return _to_public(analyzer.by_merchant(merchant))


@router.get("/date-range")
def list_in_date_range(
    start: str,
    end: str,
    analyzer: TransactionAnalyzer = Depends(get_analyzer),
):
    """
    start/end are ISO dates, both inclusive. Example: 2019-01-01 .. 2019-01-31
    """
    return _to_public(analyzer.in_date_range(start, end))


@router.get("/amount-range")
def list_by_amount_range(
    min_amount: float,
    max_amount: float,
    analyzer: TransactionAnalyzer = Depends(get_analyzer),
):
    return _to_public(analyzer.by_amount_range(min_amount, max_amount))


@router.get("/before")
def list_before_date(date: str, analyzer: TransactionAnalyzer = Depends(get_analyzer)):
    return _to_public(analyzer.before_date(date))


@router.get("/id/{transaction_id}")
def get_transaction(transaction_id: str, analyzer: TransactionAnalyzer = Depends(get_analyzer)):
    """
    Lookup by id lives under /id/ so ids such as "types" or "before" do not
    collide with the listing routes.
    """
    transaction = analyzer.find_by_id(transaction_id)
    if transaction is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction.to_dict()

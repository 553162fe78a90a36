from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from app.models.transaction import Transaction

logger = logging.getLogger(__name__)

DEBIT = "debit"
CREDIT = "credit"
EQUAL = "equal"


def is_amount(value: Any) -> bool:
    """True for numeric amounts; missing or non-numeric amounts are left out of sums and ranges."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 date/timestamp into a naive local datetime.
    Returns None for anything that cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(value)
        except (TypeError, ValueError):
            return None

    if parsed.tzinfo is not None:
        # Compare everything in local wall-clock time
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


class TransactionAnalyzer:
    """
    In-memory analytics over an ordered list of transactions. Every query is a
    single pass over the list and returns plain values; nothing here raises for
    empty collections, malformed dates or missing amounts.
    """

    def __init__(self, raw_records: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        self._transactions: List[Transaction] = [
            Transaction.from_raw(raw) for raw in (raw_records or [])
        ]

    def __len__(self) -> int:
        return len(self._transactions)

    def add_transaction(self, raw: Mapping[str, Any]) -> Transaction:
        transaction = Transaction.from_raw(raw)
        self._transactions.append(transaction)
        logger.info(f"Added transaction {transaction.id} ({len(self._transactions)} total)")
        return transaction

    def all_transactions(self) -> List[Transaction]:
        return self._transactions

    def unique_types(self) -> List[Any]:
        return list(dict.fromkeys(t.type for t in self._transactions))

    def total_amount(self) -> float:
        return sum((t.amount for t in self._transactions if is_amount(t.amount)), 0)

    def by_type(self, kind: str) -> List[Transaction]:
        return [t for t in self._transactions if t.type == kind]

    def by_merchant(self, merchant: str) -> List[Transaction]:
        return [t for t in self._transactions if t.merchant == merchant]

    def average_amount(self) -> Optional[float]:
        """Mean amount, or None when there are no transactions to average."""
        if not self._transactions:
            return None
        return self.total_amount() / len(self._transactions)

    def find_by_id(self, transaction_id: Any) -> Optional[Transaction]:
        return next((t for t in self._transactions if t.id == transaction_id), None)

    def total_debit(self) -> float:
        return sum(
            (t.amount for t in self._transactions if t.type == DEBIT and is_amount(t.amount)), 0
        )

    def descriptions(self) -> List[Any]:
        return [t.description for t in self._transactions]

    def in_date_range(self, start: Any, end: Any) -> List[Transaction]:
        """Transactions dated within [start, end], both bounds inclusive."""
        start_dt = parse_date(start)
        end_dt = parse_date(end)
        if start_dt is None or end_dt is None:
            return []

        result = []
        for t in self._transactions:
            when = parse_date(t.date)
            if when is not None and start_dt <= when <= end_dt:
                result.append(t)
        return result

    def by_amount_range(self, min_amount: float, max_amount: float) -> List[Transaction]:
        return [
            t for t in self._transactions
            if is_amount(t.amount) and min_amount <= t.amount <= max_amount
        ]

    def before_date(self, cutoff: Any) -> List[Transaction]:
        cutoff_dt = parse_date(cutoff)
        if cutoff_dt is None:
            return []

        result = []
        for t in self._transactions:
            when = parse_date(t.date)
            if when is not None and when < cutoff_dt:
                result.append(t)
        return result

    @staticmethod
    def _busiest_month(transactions: Iterable[Transaction]) -> Optional[str]:
        # Months from different years share one bucket.
        counts: Counter = Counter()
        for t in transactions:
            when = parse_date(t.date)
            if when is not None:
                counts[when.month] += 1

        busiest = None
        best = 0
        for month in sorted(counts):
            if counts[month] > best:
                best = counts[month]
                busiest = str(month)
        return busiest

    def most_transactions_month(self) -> Optional[str]:
        """
        Calendar month ("1".."12") with the most transactions, ignoring the
        year. Ties go to the lowest month number; None when there is no data.
        """
        return self._busiest_month(self._transactions)

    def most_debit_month(self) -> Optional[str]:
        return self._busiest_month(self.by_type(DEBIT))

    def dominant_type(self) -> str:
        debit_count = 0
        credit_count = 0
        for t in self._transactions:
            if t.type == DEBIT:
                debit_count += 1
            elif t.type == CREDIT:
                credit_count += 1

        if debit_count == credit_count:
            return EQUAL
        return DEBIT if debit_count > credit_count else CREDIT

    def total_amount_by_date(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> float:
        """
        Sum of amounts for transactions matching every given date component.
        Omitted components match anything; month is 1-indexed.
        """
        if year is None and month is None and day is None:
            return self.total_amount()

        total = 0
        for t in self._transactions:
            when = parse_date(t.date)
            if when is None or not is_amount(t.amount):
                continue
            if year is not None and when.year != year:
                continue
            if month is not None and when.month != month:
                continue
            if day is not None and when.day != day:
                continue
            total += t.amount
        return total

    def summary(self) -> Dict[str, Any]:
        return {
            "transaction_count": len(self._transactions),
            "unique_types": self.unique_types(),
            "total_amount": self.total_amount(),
            "debit_count": len(self.by_type(DEBIT)),
            "average_amount": self.average_amount(),
            "total_debit": self.total_debit(),
            "most_transactions_month": self.most_transactions_month(),
            "most_debit_month": self.most_debit_month(),
            "dominant_type": self.dominant_type(),
        }

"""
Transaction Loader
Reads raw transaction records from a JSON export into a TransactionAnalyzer
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from app.utils.analyzer import TransactionAnalyzer

logger = logging.getLogger(__name__)


class TransactionLoadError(ValueError):
    """Raised when a transactions file does not hold a JSON array of objects."""


def load_transactions(path: Optional[str | Path]) -> List[Dict[str, Any]]:
    """
    Load raw transaction records from a JSON file.

    Args:
        path: Location of a JSON file whose top level is an array of records

    Returns:
        list: Raw records, or [] when no path is given or the file is missing
    """
    if not path:
        return []

    source = Path(path)
    if not source.exists():
        logger.warning(f"Transactions file not found: {source}. Starting with no transactions.")
        return []

    with source.open(encoding="utf-8") as fp:
        data = json.load(fp)

    if not isinstance(data, list):
        raise TransactionLoadError(
            f"Expected a JSON array of transactions in {source}, got {type(data).__name__}"
        )

    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise TransactionLoadError(
                f"Transaction at index {index} in {source} is not an object: {item!r}"
            )

    logger.info(f"Loaded {len(data)} transactions from {source}")
    return data


def load_analyzer(path: Optional[str | Path]) -> TransactionAnalyzer:
    return TransactionAnalyzer(load_transactions(path))

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel


@dataclass(frozen=True)
class Transaction:
    """A single financial transaction. Values are stored exactly as received."""

    id: Any
    date: Any
    amount: Any
    type: Any
    description: Any = ""
    merchant: Any = ""
    card_type: Any = ""

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Transaction":
        """Build a transaction from a raw record keyed the way the JSON export is."""
        return cls(
            id=raw.get("transaction_id"),
            date=raw.get("transaction_date"),
            amount=raw.get("transaction_amount"),
            type=raw.get("transaction_type"),
            description=raw.get("transaction_description"),
            merchant=raw.get("merchant_name"),
            card_type=raw.get("card_type"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "amount": self.amount,
            "type": self.type,
            "description": self.description,
            "merchant": self.merchant,
            "card_type": self.card_type,
        }

    def serialize(self) -> str:
        # Debug/log representation only, not read back anywhere
        return json.dumps({
            "id": self.id,
            "date": self.date,
            "amount": self.amount,
            "type": self.type,
            "description": self.description,
            "merchant": self.merchant,
            "cardType": self.card_type,
        }, default=str)

    def __str__(self) -> str:
        return self.serialize()


class TransactionCreate(BaseModel):
    transaction_id: str
    transaction_date: str
    transaction_amount: float
    transaction_type: str
    transaction_description: Optional[str] = ""
    merchant_name: Optional[str] = ""
    card_type: Optional[str] = ""


class TransactionPublic(BaseModel):
    id: Optional[str] = None
    date: Optional[str] = None
    amount: Optional[float] = None
    type: Optional[str] = None
    description: Optional[str] = ""
    merchant: Optional[str] = ""
    card_type: Optional[str] = ""

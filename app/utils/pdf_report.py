import csv
import io
from datetime import datetime
from typing import Any, Dict, Iterable

from fpdf import FPDF

from app.models.transaction import Transaction

CSV_FIELDS = ["id", "date", "amount", "type", "description", "merchant", "card_type"]

SUMMARY_LABELS = {
    "transaction_count": "Total transactions",
    "unique_types": "Unique transaction types",
    "total_amount": "Total amount",
    "debit_count": "Debit transactions",
    "average_amount": "Average amount",
    "total_debit": "Total debit amount",
    "most_transactions_month": "Month with most transactions",
    "most_debit_month": "Month with most debit transactions",
    "dominant_type": "Dominant transaction type",
}


def format_summary_value(value: Any) -> str:
    if value is None:
        return "n/a"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value) or "none"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def generate_pdf(summary: Dict[str, Any], title: str = "Transaction Summary") -> bytes:
    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, title, new_x="LMARGIN", new_y="NEXT")

    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 8, f"Generated: {datetime.utcnow().isoformat(timespec='seconds')}Z", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(5)

    pdf.set_font("Helvetica", "", 12)
    for key, value in summary.items():
        label = SUMMARY_LABELS.get(key, key)
        pdf.cell(0, 10, f"{label}: {format_summary_value(value)}", new_x="LMARGIN", new_y="NEXT")

    return bytes(pdf.output())


def generate_csv(transactions: Iterable[Transaction]) -> str:
    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=CSV_FIELDS)
    writer.writeheader()
    for t in transactions:
        writer.writerow(t.to_dict())
    return output.getvalue()

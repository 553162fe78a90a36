"""
Console report for a transactions JSON file
Usage: transaction-analyzer [path/to/transactions.json]
"""
import sys

from app.core.config import settings
from app.utils.loader import load_analyzer
from app.utils.pdf_report import SUMMARY_LABELS, format_summary_value


def build_report_lines(analyzer) -> list:
    lines = [
        f"{SUMMARY_LABELS[key]}: {format_summary_value(value)}"
        for key, value in analyzer.summary().items()
    ]
    found = analyzer.find_by_id("1") is not None
    lines += [
        f"Transactions at merchant 'SuperMart': {len(analyzer.by_merchant('SuperMart'))}",
        f"Transaction with ID '1': {'found' if found else 'not found'}",
        f"Transaction descriptions: {len(analyzer.descriptions())}",
        f"Transactions from 2019-01-01 to 2019-01-31: {len(analyzer.in_date_range('2019-01-01', '2019-01-31'))}",
        f"Transactions with amount from 50 to 100: {len(analyzer.by_amount_range(50, 100))}",
        f"Transactions before 2019-02-01: {len(analyzer.before_date('2019-02-01'))}",
        f"Total amount on 2019-01-01: {format_summary_value(analyzer.total_amount_by_date(2019, 1, 1))}",
    ]
    return lines


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else settings.TRANSACTIONS_JSON

    analyzer = load_analyzer(path)
    for line in build_report_lines(analyzer):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())

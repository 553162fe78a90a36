from fastapi import Request

from app.utils.analyzer import TransactionAnalyzer


def get_analyzer(request: Request) -> TransactionAnalyzer:
    """The analyzer created at startup and owned by the running app"""
    return request.app.state.analyzer

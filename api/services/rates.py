"""Query shapes served by the rate endpoints.

Each call loads a fresh copy of the ECB document through ``load``; nothing is
cached between calls.
"""
from datetime import date
from typing import List, Optional

from api.deps import DocumentLoader
from core.fx_rates import ExchangeRate, extract_rates, list_currencies, select_latest


def get_currencies(load: DocumentLoader) -> List[str]:
    return list_currencies(load())


def get_rates(
    load: DocumentLoader,
    currency_code: str,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[ExchangeRate]:
    return extract_rates(load(), currency_code, start, end)


def get_rates_on(load: DocumentLoader, currency_code: str, day: date) -> List[ExchangeRate]:
    return get_rates(load, currency_code, day, day)


def get_latest_rates(load: DocumentLoader, currency_code: str) -> List[ExchangeRate]:
    # Full history is converted first, then trimmed to its most recent date.
    return select_latest(get_rates(load, currency_code))

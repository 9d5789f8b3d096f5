from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Tuple

import requests

from core.config import get_ecb_url, get_http_timeout
from core.errors import (
    CurrencyNotFoundError,
    ExtractionError,
    FormatError,
    MalformedDocumentError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

REFERENCE_CURRENCY = "EUR"
TIME_ATTR = "time"
CURRENCY_ATTR = "currency"
RATE_ATTR = "rate"

# Digits with an optional period-separated fraction, nothing else.
RATE_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)?")


@dataclass(frozen=True)
class ExchangeRate:
    """Value of one unit of the base currency expressed in ``currency_code`` on ``date``."""

    currency_code: str
    rate: Decimal
    date: date


def fetch_ecb_document(url: Optional[str] = None, timeout: Optional[float] = None) -> str:
    url = url or get_ecb_url()
    timeout = timeout if timeout is not None else get_http_timeout()
    logger.debug("Fetching ECB rates from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("ECB fetch from %s failed: %s", url, exc)
        raise UpstreamError(f"Failed to fetch ECB rates from {url}: {exc}") from exc
    logger.info("Fetched ECB document (%d bytes)", len(response.content))
    return response.text


def parse_ecb_document(text: str) -> ET.Element:
    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise MalformedDocumentError(f"ECB document is not well-formed XML: {exc}") from exc


def load_ecb_document() -> ET.Element:
    return parse_ecb_document(fetch_ecb_document())


def _elements_with(root: ET.Element, attribute: str) -> Iterator[ET.Element]:
    # iter() walks the whole tree, so the nesting depth of Cube elements does not matter.
    for element in root.iter():
        if attribute in element.attrib:
            yield element


def list_currencies(root: ET.Element) -> List[str]:
    currencies = {element.attrib[CURRENCY_ATTR] for element in _elements_with(root, CURRENCY_ATTR)}
    if not currencies:
        raise ExtractionError("No currency elements found in the ECB document")
    currencies.add(REFERENCE_CURRENCY)
    return sorted(currencies)


def _parse_day(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError as exc:
        raise FormatError(f"Invalid date {raw!r} in ECB document") from exc


def _parse_rate(raw: Optional[str], currency: str) -> Decimal:
    if raw is None:
        raise FormatError(f"Rate attribute is missing for {currency}")
    if not RATE_PATTERN.fullmatch(raw):
        raise FormatError(f"Invalid rate {raw!r} for {currency}")
    rate = Decimal(raw)
    if rate == 0:
        raise FormatError(f"Invalid rate {raw!r} for {currency}")
    return rate


def _snapshot_rates(snapshot: ET.Element) -> Dict[str, Decimal]:
    euro_rates: Dict[str, Decimal] = {}
    for cube in snapshot:
        if CURRENCY_ATTR not in cube.attrib and RATE_ATTR not in cube.attrib:
            continue
        currency = cube.attrib.get(CURRENCY_ATTR)
        if not currency:
            raise FormatError("Currency attribute is missing")
        euro_rates[currency] = _parse_rate(cube.attrib.get(RATE_ATTR), currency)
    # The ECB publishes everything against EUR and never lists EUR itself.
    euro_rates[REFERENCE_CURRENCY] = Decimal("1.0")
    return euro_rates


def _snapshots(root: ET.Element) -> List[Tuple[date, ET.Element]]:
    # All dates are parsed up front: one bad date fails the call.
    return [(_parse_day(node.attrib[TIME_ATTR]), node) for node in _elements_with(root, TIME_ATTR)]


def extract_rates(
    root: ET.Element,
    base_currency: str,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[ExchangeRate]:
    rates: List[ExchangeRate] = []
    for day, snapshot in _snapshots(root):
        if start and day < start:
            continue
        if end and day > end:
            continue
        euro_rates = _snapshot_rates(snapshot)
        base_rate = euro_rates.get(base_currency)
        if base_rate is None:
            raise CurrencyNotFoundError(base_currency)
        for currency, euro_rate in euro_rates.items():
            rates.append(ExchangeRate(currency_code=currency, rate=euro_rate / base_rate, date=day))
    rates.sort(key=lambda item: (item.date, item.currency_code))
    logger.debug("Extracted %d rates against %s", len(rates), base_currency)
    return rates


def select_latest(rates: List[ExchangeRate]) -> List[ExchangeRate]:
    if not rates:
        raise ExtractionError("No rate snapshots found in the ECB document")
    latest = max(item.date for item in rates)
    return [item for item in rates if item.date == latest]

import xml.etree.ElementTree as ET
from typing import Callable, Optional

from fastapi import HTTPException, Query

from core.fx_rates import load_ecb_document

DocumentLoader = Callable[[], ET.Element]


def get_document_loader() -> DocumentLoader:
    return load_ecb_document


def require_currency_code(
    currency_code: Optional[str] = Query(default=None, alias="currencyCode"),
) -> str:
    cleaned = (currency_code or "").strip().upper()
    if not cleaned:
        raise HTTPException(status_code=400, detail="Currency code is required")
    return cleaned

from typing import List

from fastapi import APIRouter, Depends

from api.deps import DocumentLoader, get_document_loader
from api.schemas import ErrorResponse
from api.services.rates import get_currencies

router = APIRouter(tags=["currencies"])


@router.get(
    "/currencies",
    response_model=List[str],
    summary="List all currencies published by the ECB",
    responses={502: {"model": ErrorResponse, "description": "ECB document unavailable or malformed"}},
)
def currencies(load: DocumentLoader = Depends(get_document_loader)):
    return get_currencies(load)

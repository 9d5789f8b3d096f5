from datetime import datetime, timezone

from fastapi import APIRouter

from api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

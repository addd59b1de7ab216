from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter(tags=["health"])

@router.get("/health", summary="Liveness")
def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

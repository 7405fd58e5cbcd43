from fastapi import APIRouter

from openrouter_dashboard.schemas.health import HealthStatus
from openrouter_dashboard.utils.time_utils import utc_now_iso

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthStatus, summary="Liveness probe")
def health():
    """No auth; a `token` query parameter is ignored."""
    return {"status": "ok", "timestamp": utc_now_iso()}

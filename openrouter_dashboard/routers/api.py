from fastapi import APIRouter

from openrouter_dashboard.core.upstream import openrouter_client
from openrouter_dashboard.schemas.error import ErrorBody

router = APIRouter(prefix="/api", tags=["OpenRouter"])  # protected by token dependency when included

_error_responses = {
    401: {"model": ErrorBody, "description": "Missing or invalid token"},
    500: {"model": ErrorBody, "description": "Upstream unreachable or malformed response"},
}


@router.get(
    "/keys",
    summary="API keys",
    description=(
        "Relays `GET /keys` from OpenRouter. The upstream JSON body is returned "
        "unchanged; upstream errors keep their status with "
        "`{error, details}` as body."
    ),
    responses=_error_responses,
)
async def get_keys():
    return await openrouter_client.relay("keys", "OpenRouter keys")


@router.get(
    "/credits",
    summary="Credits",
    description="Relays `GET /credits` from OpenRouter (total credits and usage).",
    responses=_error_responses,
)
async def get_credits():
    return await openrouter_client.relay("credits", "OpenRouter credits")

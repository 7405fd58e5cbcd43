import hmac
from typing import Optional

from fastapi import Query, Request

from openrouter_dashboard.config.settings import settings
from openrouter_dashboard.core.errors import AuthError


def token_required(request: Request, token: Optional[str] = Query(None, description="Dashboard access token")):
    """Dependencia que valida el query param `token` contra `settings.DASHBOARD_TOKEN`.

    Missing or empty token and a mismatching token are rejected with
    distinct 401 bodies. A repeated `token` parameter is never a match.
    """
    if not token:
        raise AuthError(
            "Unauthorized: Token is required",
            "Please provide a token via ?token=YOUR_TOKEN query parameter",
        )
    expected = settings.DASHBOARD_TOKEN or ""
    if len(request.query_params.getlist("token")) > 1 or not hmac.compare_digest(
        token.encode("utf-8"), expected.encode("utf-8")
    ):
        raise AuthError("Unauthorized: Invalid token", "The provided token is not valid")
    return True

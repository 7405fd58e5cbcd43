from typing import Any, Dict, List, Optional

from openrouter_dashboard.utils.response import error_response


class ConfigError(Exception):
    """A required setting is missing; the process must not start."""

    def __init__(self, variable: str, hints: Optional[List[str]] = None) -> None:
        self.variable = variable
        self.hints = list(hints or [])
        super().__init__(f"{variable} is not set")

    def lines(self) -> List[str]:
        return [f"Error: {self}"] + [f"   {h}" for h in self.hints]


class GatewayError(Exception):
    """Base for errors rendered to the caller as a JSON body.

    Subclasses set `status_code` and build `payload`; the application's
    exception handler turns them into a `JSONResponse`.
    """

    status_code: int = 500

    def __init__(self, payload: Dict[str, Any], status_code: Optional[int] = None) -> None:
        self.payload = payload
        if status_code is not None:
            self.status_code = status_code
        super().__init__(payload.get("error"))


class AuthError(GatewayError):
    status_code = 401

    def __init__(self, error: str, message: str) -> None:
        super().__init__(error_response(error, message=message))


class UpstreamError(GatewayError):
    """Upstream answered with a non-2xx status; relayed with that status."""

    def __init__(self, status_code: int, error: str, details: str) -> None:
        super().__init__(error_response(error, details=details), status_code=status_code)


class TransportError(GatewayError):
    """The outbound call itself failed (DNS, connection, timeout, bad body)."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(error_response("Internal server error", message=message))

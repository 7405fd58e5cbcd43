from typing import Any, Dict, Optional


def error_response(error: str, message: Optional[str] = None, details: Optional[Any] = None) -> Dict:
    """Formato estándar de respuesta para errores.

    Estructura:
    {
      "error": "...",
      "message": "...",  # optional
      "details": ...     # optional, upstream body
    }
    """
    payload: Dict[str, Any] = {"error": error}
    if message is not None:
        payload["message"] = message
    if details is not None:
        payload["details"] = details
    return payload

"""Schemas de error para la documentación OpenAPI."""
from pydantic import BaseModel
from typing import Any, Optional


class ErrorBody(BaseModel):
    """Cuerpo de error devuelto por el guard y el relay."""
    error: str
    message: Optional[str] = None  # auth and transport failures
    details: Optional[Any] = None  # upstream body, verbatim

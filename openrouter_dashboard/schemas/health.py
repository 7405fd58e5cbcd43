from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    timestamp: str  # ISO-8601, UTC

"""OpenRouter Dashboard: token-gated proxy for OpenRouter usage stats.

Exposes the FastAPI instance as `app` so `uvicorn openrouter_dashboard:app`
and `from openrouter_dashboard import app` both work.
"""
from openrouter_dashboard.main import app

__all__ = ["app"]

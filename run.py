"""Simple runner for the FastAPI app.

Usage:
  python run.py

Required environment variables (or a .env file):
  OPENROUTER_API_KEY
  DASHBOARD_TOKEN

Optional environment variables:
  HOST (default 0.0.0.0)
  PORT (default 3000)
  UVICORN_RELOAD (true/false)

The configuration is validated before uvicorn starts; a missing secret
exits with status 1 and a hint on how to set it.
"""
import logging
import os
import sys

logger = logging.getLogger("openrouter_dashboard.run")


def main():
    # ensure project root is on PYTHONPATH when run from repo root
    cwd = os.path.dirname(os.path.abspath(__file__))
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    from openrouter_dashboard.config.settings import settings
    from openrouter_dashboard.core.errors import ConfigError
    from openrouter_dashboard.core.logging_config import setup_logging

    try:
        settings.validate()
    except ConfigError as e:
        for line in e.lines():
            print(line, file=sys.stderr)
        sys.exit(1)

    setup_logging()
    logger.info("OpenRouter Dashboard Server running on port %s", settings.PORT)
    logger.info("Dashboard: http://localhost:%s/?token=YOUR_DASHBOARD_TOKEN", settings.PORT)

    # run uvicorn programmatically; use module string so reload works
    import uvicorn

    uvicorn.run("openrouter_dashboard:app", host=settings.HOST, port=settings.PORT, reload=settings.UVICORN_RELOAD)


if __name__ == "__main__":
    main()

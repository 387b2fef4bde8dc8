"""FastAPI REST API for booth configuration.

This module provides a REST API for browsing the catalog, quoting and
validating booth configurations, and exporting parameter files.

Usage:
    uvicorn booths.web:app --reload
"""

from booths.web.app import app, create_app

__all__ = ["app", "create_app"]

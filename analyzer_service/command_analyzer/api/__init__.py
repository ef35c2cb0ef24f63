"""
api
===

FastAPI router for the analyzer service (/analyze, /analyze-code, /health).

The API layer follows the principle of thin controllers: endpoints receive
requests, delegate to the analyzer services and return their results.
"""

from .routes import router

__all__ = ["router"]

"""Capa web (FastAPI).

Expone el pipeline como un endpoint de streaming `text/plain` y sirve una
página mínima que lo consume.
"""

from web.app import create_app

__all__ = ["create_app"]

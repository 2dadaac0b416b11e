"""Mini README: Interfaces (JSON API) for the weekly sales ledger.

Exports the FastAPI application factory that lets presentation clients add,
list, delete and summarise transactions over HTTP.
"""

from .web_app import create_application

__all__ = ["create_application"]

"""Mini README: Core package initializer for the weekly sales ledger.

Exposes the logging helper so entry points and interfaces can share one
configuration. The ledger itself lives in ``salesweek.ledger``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]

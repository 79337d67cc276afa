# valetudo_map/api/deps.py
"""
Dependency injection for API routes.
"""
from fastapi import HTTPException

from ..core import SharedState
from ..models import MapDocument

# Global shared state instance
_shared: SharedState = None


def get_shared() -> SharedState:
    """Get the global shared state."""
    global _shared
    if _shared is None:
        _shared = SharedState()
    return _shared


def set_shared(shared: SharedState):
    """Set the global shared state (called during app startup)."""
    global _shared
    _shared = shared


def get_document() -> MapDocument:
    """Current decoded map, or 404 if nothing has been decoded yet."""
    doc = get_shared().current()
    if doc is None:
        raise HTTPException(status_code=404, detail="no map decoded yet")
    return doc

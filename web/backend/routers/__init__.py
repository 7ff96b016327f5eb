"""API route handlers."""

from .missions import router as missions_router
from .recommendations import router as recommendations_router

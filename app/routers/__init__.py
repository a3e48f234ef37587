# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - reviews.py: Review CRUD, filtered listing, adding comments
# - comments.py: Editing and deleting comments by id
#
# Account and login routes live in app/auth/routes.py.
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import reviews
from . import comments

__all__ = [
    "health",
    "reviews",
    "comments",
]

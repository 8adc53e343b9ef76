# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by resource:
# - health.py: Health check endpoints
# - authors.py: Author CRUD endpoints
# - blogposts.py: Blog post CRUD endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import authors
from . import blogposts
from . import health

__all__ = [
    "authors",
    "blogposts",
    "health",
]

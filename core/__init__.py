# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the blog's business logic:
# - models/: Pydantic schemas for authors and blog posts
# - database.py: BlogRepository over a DocumentStore
# - services/: Validators, author resolution, serialization, CRUD services
#
# Routing, status codes and dependency wiring live in app/.
# =============================================================================

# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the blog API:
# - test_document_store.py / test_supabase_client.py: store backends
# - test_models.py, test_validators.py, test_resolver.py, test_serializer.py
# - test_repository.py, test_services.py: data access and business rules
# - test_*_api.py: HTTP endpoints through FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================

# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Food Reviews API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_token_service.py: Issuing and verifying access tokens
# - test_auth.py: Bearer-token gatekeeping for protected routes
# - test_review_service.py: Review CRUD and filtering
# - test_comment_service.py: Atomic comment operations
# - test_user_service.py: Registration and credential checks
# - test_api.py: End-to-end HTTP tests
#
# Run tests with: pytest
# =============================================================================

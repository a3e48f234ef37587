# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - models/: Pydantic schemas for reviews, comments and users
# - services/: Review, comment, user and token services
#
# Code in this package does not import FastAPI; services take their
# database handle or secret in their constructor and raise the shared
# exception types from app/exceptions.py.
# =============================================================================

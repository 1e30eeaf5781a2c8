# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - database.py: SQLAlchemy engine, sessions and declarative base
# - models/: stored records, planter capability, pydantic schemas
# - services/: identification resolver, photo storage, save-tree workflow
# =============================================================================

# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: Store, clock and service injection
# - auth/: Capability checks for mutating endpoints
# - routers/: JSON API endpoints organized by feature
# - pages/: Server-rendered HTML pages
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================

# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the site's business logic:
# - models/: Pydantic schemas (settings document, upload results)
# - services/: settings repository and image service
#
# Services receive their stores and clock from the caller, so they can be
# tested with the in-memory backends from lib/.
# =============================================================================

# =============================================================================
# tests/ - Test Suite
# =============================================================================
# - test_settings_api.py, test_upload_api.py, test_pages.py: endpoint tests
# - test_models.py, test_services.py, test_stores.py: unit tests
#
# Run tests with: pytest
# =============================================================================

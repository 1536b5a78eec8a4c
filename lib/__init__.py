# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Shared Supabase client
# - kv_store.py: Key-value store backends (settings document)
# - object_store.py: Object store backends (product images)
# - clock.py: Injectable clock
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

# =============================================================================
# app/pages/ - Server-Rendered Pages
# =============================================================================
# - layout.py: the shared HTML shell (Jinja2, autoescaped)
# - renderers.py: one function per page producing its content
# - router.py: path -> renderer dispatch
# =============================================================================

# =============================================================================
# app/pages/renderers.py - Page Renderers
# =============================================================================
# Each renderer turns the settings document (plus any route parameters)
# into a PageLayout. The router wraps it with the shared layout.
# =============================================================================

from app.config import settings
from app.exceptions import describe_image_types
from app.pages.layout import PageLayout, render_fragment
from core.models import SiteSettings

HIGHLIGHTS = (
    ("Quality Assurance", "Every product is inspected against international standards before it ships."),
    ("Global Logistics", "Reliable delivery to customers in more than 50 countries."),
    ("Dedicated Support", "A named account manager for every business customer."),
)

PRODUCT_CATEGORIES = (
    {"slug": "industrial-machinery", "name": "Industrial Machinery", "description": "Heavy-duty equipment for manufacturing lines."},
    {"slug": "electrical-components", "name": "Electrical Components", "description": "Switchgear, wiring and control systems."},
    {"slug": "safety-equipment", "name": "Safety Equipment", "description": "Protective gear certified for industrial sites."},
)

# (field, label, multiline) for the dashboard settings form
DASHBOARD_FIELDS = (
    ("site_name", "Site Name", False),
    ("site_description", "Site Description", True),
    ("company_intro", "Company Introduction", True),
    ("email", "Email", False),
    ("phone", "Phone", False),
    ("address", "Address", False),
    ("linkedin", "LinkedIn URL", False),
    ("facebook", "Facebook URL", False),
    ("twitter", "Twitter URL", False),
)


def home_page(site: SiteSettings) -> PageLayout:
    # The home page title is the site name on its own
    return PageLayout(
        title=site.site_name,
        content=render_fragment("pages/home.html", site=site, highlights=HIGHLIGHTS),
        meta_description=site.site_description or None,
        use_title_suffix=False,
    )


def products_page(site: SiteSettings) -> PageLayout:
    return PageLayout(
        title="Products",
        content=render_fragment("pages/products.html", site=site, categories=PRODUCT_CATEGORIES),
    )


def product_detail_page(site: SiteSettings, product_id: str) -> PageLayout:
    """Detail page for /products/<id>. The id comes from the URL and is escaped."""
    return PageLayout(
        title=f"Product {product_id}",
        content=render_fragment("pages/product_detail.html", site=site, product_id=product_id),
    )


def about_page(site: SiteSettings) -> PageLayout:
    paragraphs = [p.strip() for p in site.company_intro.split("\n") if p.strip()]
    return PageLayout(
        title="About Us",
        content=render_fragment("pages/about.html", site=site, intro_paragraphs=paragraphs),
    )


def contact_page(site: SiteSettings) -> PageLayout:
    return PageLayout(
        title="Contact Us",
        content=render_fragment("pages/contact.html", site=site),
        extra_scripts=render_fragment("pages/contact_scripts.html"),
    )


def admin_login_page(site: SiteSettings) -> PageLayout:
    return PageLayout(
        title="Admin Login",
        content=render_fragment("pages/admin_login.html", site=site),
    )


def admin_dashboard_page(site: SiteSettings) -> PageLayout:
    allowed = settings.allowed_image_types_list
    return PageLayout(
        title="Admin Dashboard",
        content=render_fragment(
            "pages/admin_dashboard.html",
            site=site.model_dump(),
            settings_fields=DASHBOARD_FIELDS,
            allowed_types=describe_image_types(allowed),
            accept=",".join(allowed),
            max_size_mb=f"{settings.max_image_size_mb:g}",
        ),
        extra_scripts=render_fragment("pages/admin_dashboard_scripts.html"),
    )

# =============================================================================
# app/pages/layout.py - HTML Layout Engine
# =============================================================================
# Wraps page content in the shared shell: head (stylesheet, title, meta
# description), navbar, main region, footer and the shared client script.
#
# Templates are Jinja2 with autoescaping on. Page content and extra scripts
# are passed as Markup (trusted, rendered from our own templates); every
# other value, including everything from the settings document, is escaped.
# =============================================================================

from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from app.config import settings
from core.models import SiteSettings

TEMPLATES_DIR = Path(__file__).parent / "templates"

NAV_LINKS = (
    ("/", "Home"),
    ("/products", "Products"),
    ("/about", "About"),
    ("/contact", "Contact"),
)

_SAFE_URL_SCHEMES = {"http", "https", "mailto"}


def safe_url(value: str | None) -> str:
    """Keep http(s)/mailto and relative URLs; anything else becomes '#'."""
    if not value:
        return "#"
    scheme = urlsplit(value.strip()).scheme.lower()
    if scheme and scheme not in _SAFE_URL_SCHEMES:
        return "#"
    return value


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["safe_url"] = safe_url
    return env


jinja_env = _build_environment()


@dataclass
class PageLayout:
    """
    One page ready to be wrapped by the layout.

    content and extra_scripts must come from render_fragment (or otherwise
    be Markup); plain strings are escaped.
    """

    title: str
    content: Markup
    extra_scripts: Markup = field(default_factory=Markup)
    meta_description: str | None = None
    use_title_suffix: bool = True


def page_title(title: str, use_suffix: bool = True) -> str:
    """'<title> - <suffix>' when use_suffix is set, else the title as-is."""
    if use_suffix:
        return f"{title} - {settings.SITE_TITLE_SUFFIX}"
    return title


def render_fragment(template_name: str, **context) -> Markup:
    """Render a partial template to trusted markup."""
    return Markup(jinja_env.get_template(template_name).render(**context))


def render_layout(
    page: PageLayout,
    site: SiteSettings,
    year: int,
    active_path: str | None = None,
) -> str:
    """
    Produce the complete HTML document for a page.

    Args:
        page: Title, content and options for this page
        site: Settings document used for the navbar and footer
        year: Copyright year shown in the footer
        active_path: Nav link to mark active (the client script also does this)

    Returns:
        The full HTML document
    """
    template = jinja_env.get_template("layout.html")
    return template.render(
        page_title=page_title(page.title, page.use_title_suffix),
        meta_description=page.meta_description or settings.DEFAULT_META_DESCRIPTION,
        content=page.content,
        extra_scripts=page.extra_scripts,
        site=site,
        nav_links=NAV_LINKS,
        active_path=active_path,
        social_links=(
            ("LinkedIn", site.linkedin),
            ("Facebook", site.facebook),
            ("Twitter", site.twitter),
        ),
        title_suffix=settings.SITE_TITLE_SUFFIX,
        year=year,
    )

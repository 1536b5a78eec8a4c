# =============================================================================
# core/models/site_settings.py - Settings Document Schema
# =============================================================================
# The settings document is a flat record of site metadata. Exactly one
# exists per deployment; when none has been saved, DEFAULT_SETTINGS stands in.
#
# Writes are full replacements: every field is rebuilt from the submission,
# falling back to '' ('GlobalMart' for site_name) when a value is missing
# or empty.
# =============================================================================

import math
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_SITE_NAME = "GlobalMart"

# Editable fields, in document order
SETTINGS_FIELDS = (
    "site_name",
    "site_description",
    "company_intro",
    "email",
    "phone",
    "address",
    "linkedin",
    "facebook",
    "twitter",
)


def _to_text(value: Any) -> str:
    """
    Render a JSON value the way the site's browser scripts print it.

    Integral floats drop their fraction ("1.0" -> "1"), arrays join their
    items with commas, and objects collapse to "[object Object]".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(_to_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def _coerce(value: Any, fallback: str = "") -> str:
    """
    Falsy values (None, '', 0, NaN, False, empty containers) become the fallback.

    Everything else is rendered with _to_text.
    """
    if not value or (isinstance(value, float) and math.isnan(value)):
        return fallback
    return _to_text(value)


class SiteSettings(BaseModel):
    """
    Site metadata shown in the navbar, footer, home, about and contact pages.

    Pages render from this model. The JSON API hands out the stored
    document as-is instead (see from_stored for how pages read it).

    Example:
        {
            "site_name": "Acme",
            "email": "sales@acme.com",
            ...
            "updated_at": "2026-01-15T10:30:00.000Z"
        }
    """

    site_name: str = DEFAULT_SITE_NAME
    site_description: str = ""
    company_intro: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    linkedin: str = ""
    facebook: str = ""
    twitter: str = ""

    # Server-assigned on every write; absent on the built-in defaults
    updated_at: str | None = Field(
        default=None,
        description="ISO-8601 timestamp of the last save"
    )

    @classmethod
    def from_submission(cls, data: dict[str, Any], updated_at: str) -> "SiteSettings":
        """
        Build a fresh document from a POSTed body.

        Only the known fields are read; anything else in the body is dropped.
        """
        values = {
            name: _coerce(data.get(name), DEFAULT_SITE_NAME if name == "site_name" else "")
            for name in SETTINGS_FIELDS
        }
        return cls(**values, updated_at=updated_at)

    @classmethod
    def from_stored(cls, document: Any) -> "SiteSettings":
        """
        Lenient read of a stored document for page rendering.

        Known fields holding strings are kept; null, missing or non-string
        values leave the field at its model default. Anything that is not a
        JSON object yields an all-default model.
        """
        if not isinstance(document, dict):
            return cls()

        values = {
            name: document[name]
            for name in (*SETTINGS_FIELDS, "updated_at")
            if isinstance(document.get(name), str)
        }
        return cls(**values)

    def to_document(self) -> dict[str, Any]:
        """Serialize for storage and responses. updated_at is omitted when unset."""
        document = self.model_dump()
        if document.get("updated_at") is None:
            document.pop("updated_at", None)
        return document


# Built-in document served until the first save
DEFAULT_SETTINGS = SiteSettings(
    site_name=DEFAULT_SITE_NAME,
    site_description=(
        "Your trusted partner for high-quality industrial products and "
        "innovative solutions worldwide"
    ),
    company_intro=(
        "We are a leading manufacturer and supplier of high-quality industrial "
        "products. With over 20 years of experience, we serve clients across the "
        "globe with innovative solutions and exceptional customer service."
    ),
    email="info@example.com",
    phone="+1 234 567 8900",
    address="123 Business St, City, Country",
    linkedin="",
    facebook="",
    twitter="",
)

"""DTOs for site-wide settings (settings/global)."""

from dataclasses import dataclass

DEFAULT_FOOTER_TEXT = "© 2024 Portfolio. All rights reserved."


@dataclass(frozen=True)
class SiteSettingsResult:
    resume_url: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    contact_location: str = ""
    footer_text: str = DEFAULT_FOOTER_TEXT

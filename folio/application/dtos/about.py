"""DTOs for the about page sections (skills, résumé entries, biography, social links)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SkillResult:
    id: str
    name: str
    icon_name: str
    color: str


@dataclass(frozen=True)
class ExperienceResult:
    id: str
    role: str
    company: str
    period: str
    description: str


@dataclass(frozen=True)
class EducationResult:
    id: str
    degree: str
    institution: str
    period: str
    description: str


@dataclass(frozen=True)
class BiographyResult:
    """One biography paragraph; paragraphs render in ascending order."""

    id: str
    content: str
    order: int = 0


@dataclass(frozen=True)
class SocialLinkResult:
    """Link in the site header/footer. icon_name is a react-icons name."""

    id: str
    platform: str
    url: str
    icon_name: str
    order: int = 0

"""Read-model DTOs (plain dataclasses, no dependency on the REST wire format)."""

from folio.application.dtos.about import (
    BiographyResult,
    EducationResult,
    ExperienceResult,
    SkillResult,
    SocialLinkResult,
)
from folio.application.dtos.blog import BlogPostResult, CommentResult
from folio.application.dtos.contact import ContactMessageResult
from folio.application.dtos.profile import ProfileResult
from folio.application.dtos.project import ProjectResult
from folio.application.dtos.settings import SiteSettingsResult
from folio.application.dtos.stats import VisitorStatsResult
from folio.application.dtos.testimonial import TestimonialResult

__all__ = [
    "BiographyResult",
    "BlogPostResult",
    "CommentResult",
    "ContactMessageResult",
    "EducationResult",
    "ExperienceResult",
    "ProfileResult",
    "ProjectResult",
    "SiteSettingsResult",
    "SkillResult",
    "SocialLinkResult",
    "TestimonialResult",
    "VisitorStatsResult",
]

"""Firestore-backed content repositories for the portfolio site."""

from folio.infrastructure.firebase.repositories.about_repo_firestore import (
    FirestoreBiographyRepository,
    FirestoreEducationRepository,
    FirestoreExperienceRepository,
    FirestoreSkillRepository,
    FirestoreSocialLinkRepository,
)
from folio.infrastructure.firebase.repositories.base import (
    FirestoreCollectionRepository,
)
from folio.infrastructure.firebase.repositories.blog_repo_firestore import (
    FirestoreBlogPostRepository,
    FirestoreCommentRepository,
)
from folio.infrastructure.firebase.repositories.contact_repo_firestore import (
    FirestoreContactRepository,
)
from folio.infrastructure.firebase.repositories.profile_repo_firestore import (
    FirestoreProfileRepository,
)
from folio.infrastructure.firebase.repositories.project_repo_firestore import (
    FirestoreProjectRepository,
)
from folio.infrastructure.firebase.repositories.settings_repo_firestore import (
    FirestoreSiteSettingsRepository,
)
from folio.infrastructure.firebase.repositories.stats_repo_firestore import (
    FirestoreVisitorStatsRepository,
)
from folio.infrastructure.firebase.repositories.testimonial_repo_firestore import (
    FirestoreTestimonialRepository,
)

__all__ = [
    "FirestoreBiographyRepository",
    "FirestoreBlogPostRepository",
    "FirestoreCollectionRepository",
    "FirestoreCommentRepository",
    "FirestoreContactRepository",
    "FirestoreEducationRepository",
    "FirestoreExperienceRepository",
    "FirestoreProfileRepository",
    "FirestoreProjectRepository",
    "FirestoreSiteSettingsRepository",
    "FirestoreSkillRepository",
    "FirestoreSocialLinkRepository",
    "FirestoreTestimonialRepository",
    "FirestoreVisitorStatsRepository",
]

"""Firestore-backed repositories for the about page sections.

Skills, work experience, education, biography paragraphs and social links
are plain admin-managed lists; each is one collection with a fixed sort.
"""

from __future__ import annotations

from folio.application.dtos.about import (
    BiographyResult,
    EducationResult,
    ExperienceResult,
    SkillResult,
    SocialLinkResult,
)
from folio.infrastructure.firebase._rest_encoding import Document
from folio.infrastructure.firebase.collections import (
    COLLECTION_BIOGRAPHY,
    COLLECTION_EDUCATIONS,
    COLLECTION_EXPERIENCES,
    COLLECTION_SKILLS,
    COLLECTION_SOCIAL_MEDIA,
)
from folio.infrastructure.firebase.counters import as_int
from folio.infrastructure.firebase.repositories._values import as_str
from folio.infrastructure.firebase.repositories.base import (
    FirestoreCollectionRepository,
)


class FirestoreSkillRepository(FirestoreCollectionRepository[SkillResult]):
    """Skills, newest first."""

    collection = COLLECTION_SKILLS
    order_by = "createdAt desc"

    def _to_result(self, doc: Document) -> SkillResult:
        return SkillResult(
            id=doc.id,
            name=as_str(doc.get("name")),
            icon_name=as_str(doc.get("iconName")),
            color=as_str(doc.get("color")),
        )

    async def create_skill(
        self, *, name: str, icon_name: str, color: str, token: str | None = None
    ) -> SkillResult:
        return await self._create(
            {"name": name, "iconName": icon_name, "color": color}, token=token
        )


class FirestoreExperienceRepository(FirestoreCollectionRepository[ExperienceResult]):
    """Work history. Sorted by the period label, so "2024 - Present" comes first."""

    collection = COLLECTION_EXPERIENCES
    order_by = "period desc"

    def _to_result(self, doc: Document) -> ExperienceResult:
        return ExperienceResult(
            id=doc.id,
            role=as_str(doc.get("role")),
            company=as_str(doc.get("company")),
            period=as_str(doc.get("period")),
            description=as_str(doc.get("description")),
        )

    async def create_experience(
        self,
        *,
        role: str,
        company: str,
        period: str,
        description: str,
        token: str | None = None,
    ) -> ExperienceResult:
        return await self._create(
            {
                "role": role,
                "company": company,
                "period": period,
                "description": description,
            },
            token=token,
        )


class FirestoreEducationRepository(FirestoreCollectionRepository[EducationResult]):
    collection = COLLECTION_EDUCATIONS
    order_by = "period desc"

    def _to_result(self, doc: Document) -> EducationResult:
        return EducationResult(
            id=doc.id,
            degree=as_str(doc.get("degree")),
            institution=as_str(doc.get("institution")),
            period=as_str(doc.get("period")),
            description=as_str(doc.get("description")),
        )

    async def create_education(
        self,
        *,
        degree: str,
        institution: str,
        period: str,
        description: str,
        token: str | None = None,
    ) -> EducationResult:
        return await self._create(
            {
                "degree": degree,
                "institution": institution,
                "period": period,
                "description": description,
            },
            token=token,
        )


class FirestoreBiographyRepository(FirestoreCollectionRepository[BiographyResult]):
    """Biography paragraphs in display order."""

    collection = COLLECTION_BIOGRAPHY
    order_by = "order asc"

    def _to_result(self, doc: Document) -> BiographyResult:
        return BiographyResult(
            id=doc.id,
            content=as_str(doc.get("content")),
            order=as_int(doc.get("order")),
        )

    async def create_paragraph(
        self, *, content: str, order: int, token: str | None = None
    ) -> BiographyResult:
        return await self._create({"content": content, "order": order}, token=token)


class FirestoreSocialLinkRepository(FirestoreCollectionRepository[SocialLinkResult]):
    """Social media links in display order."""

    collection = COLLECTION_SOCIAL_MEDIA
    order_by = "order asc"

    def _to_result(self, doc: Document) -> SocialLinkResult:
        return SocialLinkResult(
            id=doc.id,
            platform=as_str(doc.get("platform")),
            url=as_str(doc.get("url")),
            icon_name=as_str(doc.get("iconName")),
            order=as_int(doc.get("order")),
        )

    async def create_link(
        self,
        *,
        platform: str,
        url: str,
        icon_name: str,
        order: int = 0,
        token: str | None = None,
    ) -> SocialLinkResult:
        return await self._create(
            {"platform": platform, "url": url, "iconName": icon_name, "order": order},
            token=token,
        )

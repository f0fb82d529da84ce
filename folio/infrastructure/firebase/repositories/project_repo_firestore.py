"""Firestore-backed project repository."""

from __future__ import annotations

from typing import Any

from folio.application.dtos.project import ProjectResult
from folio.domain.exceptions import DocumentNotFoundException
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient
from folio.infrastructure.firebase._rest_encoding import Document
from folio.infrastructure.firebase.collections import COLLECTION_PROJECTS
from folio.infrastructure.firebase.repositories._values import (
    as_bool,
    as_str,
    as_str_list,
)
from folio.shared.utils.datetime import utc_now_iso


class FirestoreProjectRepository:
    """Portfolio projects. Writes need an admin token."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _to_result(self, doc: Document) -> ProjectResult:
        return ProjectResult(
            id=doc.id,
            title=as_str(doc.get("title")),
            description=as_str(doc.get("description")),
            image=as_str(doc.get("image")),
            category=as_str(doc.get("category")),
            is_public=as_bool(doc.get("isPublic")),
            tags=as_str_list(doc.get("tags")),
            github_url=as_str(doc.get("githubUrl")),
            live_url=as_str(doc.get("liveUrl")),
            created_at=as_str(doc.get("createdAt")),
        )

    async def list_projects(
        self, include_private: bool = False, token: str | None = None
    ) -> list[ProjectResult]:
        """Return projects, newest first; private ones only when include_private."""
        docs = await self._client.list(
            COLLECTION_PROJECTS, order_by="createdAt desc", token=token
        )
        results = [self._to_result(d) for d in docs]
        if include_private:
            return results
        return [p for p in results if p.is_public]

    async def get_by_id(
        self, project_id: str, token: str | None = None
    ) -> ProjectResult | None:
        """Return project by ID, or None."""
        try:
            doc = await self._client.get(COLLECTION_PROJECTS, project_id, token=token)
        except DocumentNotFoundException:
            return None
        return self._to_result(doc)

    async def create_project(
        self,
        *,
        title: str,
        description: str,
        image: str,
        category: str,
        tags: list[str],
        is_public: bool,
        github_url: str = "",
        live_url: str = "",
        token: str | None = None,
    ) -> ProjectResult:
        """Create a project; the store assigns its ID."""
        doc = await self._client.create(
            COLLECTION_PROJECTS,
            {
                "title": title,
                "description": description,
                "image": image,
                "category": category,
                "tags": tags,
                "isPublic": is_public,
                "githubUrl": github_url,
                "liveUrl": live_url,
                "createdAt": utc_now_iso(),
            },
            token=token,
        )
        return self._to_result(doc)

    async def update_project(
        self, project_id: str, changes: dict[str, Any], token: str | None = None
    ) -> ProjectResult:
        """Patch the given document fields (camelCase keys) and stamp updatedAt."""
        doc = await self._client.patch(
            COLLECTION_PROJECTS,
            project_id,
            {**changes, "updatedAt": utc_now_iso()},
            token=token,
        )
        return self._to_result(doc)

    async def delete_project(self, project_id: str, token: str | None = None) -> None:
        await self._client.delete(COLLECTION_PROJECTS, project_id, token=token)

"""Seed dev content from scripts/seed-data.json into Firestore.

Loads projects, blog posts and testimonials. Blog posts are matched by slug
and projects by title; existing ones are skipped so the script can be re-run.
Writes run as the service account (security rules require an admin).

Usage:
    uv run python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Requires: FIREBASE_PROJECT_ID, FIREBASE_API_KEY and
FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from folio.core.config import get_settings
from folio.domain.exceptions import FolioException
from folio.infrastructure.firebase.client import create_firestore_client
from folio.infrastructure.firebase.collections import (
    COLLECTION_BLOG_POSTS,
    COLLECTION_TESTIMONIALS,
)
from folio.infrastructure.firebase.repositories import (
    FirestoreBlogPostRepository,
    FirestoreProjectRepository,
)
from folio.shared.telemetry.logging import setup_logging
from folio.shared.telemetry.telemetry import TelemetryConfig
from folio.shared.utils.datetime import utc_now_iso


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees FIREBASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)
    get_settings.cache_clear()


async def run(path: Path) -> None:
    _load_env()
    setup_logging()
    settings = get_settings()
    telemetry = TelemetryConfig.from_settings(settings)
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    telemetry.instrument_logging()
    try:
        await _seed(path)
    finally:
        telemetry.shutdown()


async def _seed(path: Path) -> None:
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open() as f:
        data = json.load(f)
    projects_data = data.get("projects", [])
    posts_data = data.get("blog_posts", [])
    testimonials_data = data.get("testimonials", [])

    try:
        client = create_firestore_client(use_service_account=True)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    async with client:
        project_repo = FirestoreProjectRepository(client)
        post_repo = FirestoreBlogPostRepository(client)

        existing_titles = {
            p.title for p in await project_repo.list_projects(include_private=True)
        }
        for p in projects_data:
            if p["title"] in existing_titles:
                print(f"  Project {p['title']!r} already exists, skip")
                continue
            created = await project_repo.create_project(
                title=p["title"],
                description=p.get("description", ""),
                image=p.get("image", ""),
                category=p.get("category", "web"),
                tags=p.get("tags", []),
                is_public=p.get("isPublic", True),
                github_url=p.get("githubUrl", ""),
                live_url=p.get("liveUrl", ""),
            )
            print(f"  Project {created.title!r} -> {created.id}")

        for post in posts_data:
            slug = post["slug"]
            if await post_repo.get_by_slug(slug) is not None:
                print(f"  Blog post {slug} already exists, skip")
                continue
            try:
                created_doc = await client.create(
                    COLLECTION_BLOG_POSTS,
                    {
                        "views": 0,
                        "likes": 0,
                        "shares": 0,
                        "commentCount": 0,
                        "isPublic": True,
                        **post,
                        "createdAt": utc_now_iso(),
                    },
                )
            except FolioException as e:
                print(f"  Skip blog post {slug}: {e.message}", file=sys.stderr)
                continue
            print(f"  Blog post {slug} -> {created_doc.id}")

        for t in testimonials_data:
            created_doc = await client.create(
                COLLECTION_TESTIMONIALS, {**t, "createdAt": utc_now_iso()}
            )
            print(f"  Testimonial from {t.get('userDisplayName', '?')} -> {created_doc.id}")

    print("Seed completed.")


def main() -> None:
    root = _project_root()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg) if path_arg else root / "scripts" / "seed-data.json"
    if not path.is_absolute():
        path = (root / path).resolve()
    asyncio.run(run(path))


if __name__ == "__main__":
    main()

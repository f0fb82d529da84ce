"""Firestore-backed blog post and comment repositories.

Post counters (views, likes, shares, commentCount) are maintained with
counters.increment_field, which is read-then-write and can lose updates
under concurrent writers.
"""

from __future__ import annotations

from folio.application.dtos.blog import BlogPostResult, CommentResult
from folio.domain.exceptions import DocumentNotFoundException
from folio.infrastructure.firebase._rest_client import FirestoreRESTClient
from folio.infrastructure.firebase._rest_encoding import Document
from folio.infrastructure.firebase._rest_query import (
    ASCENDING,
    DESCENDING,
    FieldFilter,
    Order,
    QuerySpec,
)
from folio.infrastructure.firebase.collections import (
    COLLECTION_BLOG_COMMENTS,
    COLLECTION_BLOG_POSTS,
)
from folio.infrastructure.firebase.counters import as_int, increment_field
from folio.infrastructure.firebase.repositories._values import (
    as_bool,
    as_str,
    as_str_list,
)
from folio.shared.utils.datetime import utc_now_iso


class FirestoreBlogPostRepository:
    """Blog posts: public reads by slug, and engagement counters."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _to_result(self, doc: Document) -> BlogPostResult:
        return BlogPostResult(
            id=doc.id,
            title=as_str(doc.get("title")),
            slug=as_str(doc.get("slug")),
            excerpt=as_str(doc.get("excerpt")),
            content=as_str(doc.get("content")),
            date=as_str(doc.get("date")),
            category=as_str(doc.get("category")),
            author=as_str(doc.get("author")),
            image=as_str(doc.get("image")),
            is_public=as_bool(doc.get("isPublic")),
            # Posts written before the toggle existed show comments.
            show_comments=as_bool(doc.get("showComments"), default=True),
            tags=as_str_list(doc.get("tags")),
            views=as_int(doc.get("views")),
            likes=as_int(doc.get("likes")),
            shares=as_int(doc.get("shares")),
            comment_count=as_int(doc.get("commentCount")),
        )

    async def get_by_id(
        self, post_id: str, token: str | None = None
    ) -> BlogPostResult | None:
        """Return post by ID, or None."""
        try:
            doc = await self._client.get(COLLECTION_BLOG_POSTS, post_id, token=token)
        except DocumentNotFoundException:
            return None
        return self._to_result(doc)

    async def get_by_slug(
        self, slug: str, token: str | None = None
    ) -> BlogPostResult | None:
        """Return the post with this slug, or None."""
        docs = await self._client.query(
            COLLECTION_BLOG_POSTS,
            QuerySpec(where=[FieldFilter("slug", "EQUAL", slug)], limit=1),
            token=token,
        )
        return self._to_result(docs[0]) if docs else None

    async def list_published(
        self, limit: int | None = None, token: str | None = None
    ) -> list[BlogPostResult]:
        """Return public posts, newest date first."""
        docs = await self._client.query(
            COLLECTION_BLOG_POSTS,
            QuerySpec(
                where=[FieldFilter("isPublic", "EQUAL", True)],
                order_by=[Order("date", DESCENDING)],
                limit=limit,
            ),
            token=token,
        )
        return [self._to_result(d) for d in docs]

    async def record_view(self, post_id: str, token: str | None = None) -> int:
        """Increment views; returns the new count."""
        return await increment_field(
            self._client, COLLECTION_BLOG_POSTS, post_id, "views", token=token
        )

    async def like(self, post_id: str, token: str | None = None) -> int:
        """Increment likes; returns the new count."""
        return await increment_field(
            self._client, COLLECTION_BLOG_POSTS, post_id, "likes", token=token
        )

    async def share(self, post_id: str, token: str | None = None) -> int:
        """Increment shares; returns the new count."""
        return await increment_field(
            self._client, COLLECTION_BLOG_POSTS, post_id, "shares", token=token
        )


class FirestoreCommentRepository:
    """Comments on blog posts (flat collection keyed by blogId)."""

    def __init__(self, client: FirestoreRESTClient) -> None:
        self._client = client

    def _to_result(self, doc: Document) -> CommentResult:
        parent_id = as_str(doc.get("parentId"))
        return CommentResult(
            id=doc.id,
            blog_id=as_str(doc.get("blogId")),
            user_id=as_str(doc.get("userId")),
            user_display_name=as_str(doc.get("userDisplayName")),
            content=as_str(doc.get("content")),
            created_at=as_str(doc.get("createdAt")),
            parent_id=parent_id or None,
            is_admin=as_bool(doc.get("isAdmin")),
            likes=as_int(doc.get("likes")),
            liked_by=as_str_list(doc.get("likedBy")),
        )

    async def list_for_post(
        self, blog_id: str, token: str | None = None
    ) -> list[CommentResult]:
        """Return a post's comments, oldest first."""
        docs = await self._client.query(
            COLLECTION_BLOG_COMMENTS,
            QuerySpec(
                where=[FieldFilter("blogId", "EQUAL", blog_id)],
                order_by=[Order("createdAt", ASCENDING)],
            ),
            token=token,
        )
        return [self._to_result(d) for d in docs]

    async def add_comment(
        self,
        *,
        blog_id: str,
        user_id: str,
        user_display_name: str,
        content: str,
        parent_id: str | None = None,
        is_admin: bool = False,
        token: str | None = None,
    ) -> CommentResult:
        """Create a comment (or reply) and bump the post's commentCount.

        The post is read first, so a missing post raises before any comment
        is written. The count update is read-then-write like the other
        counters.

        Raises:
            DocumentNotFoundException: the post does not exist.
        """
        post = await self._client.get(COLLECTION_BLOG_POSTS, blog_id, token=token)
        data = {
            "blogId": blog_id,
            "userId": user_id,
            "userDisplayName": user_display_name,
            "content": content,
            "createdAt": utc_now_iso(),
            "likes": 0,
            "likedBy": [],
            "isAdmin": is_admin,
        }
        if parent_id:
            data["parentId"] = parent_id
        doc = await self._client.create(COLLECTION_BLOG_COMMENTS, data, token=token)
        await self._client.patch(
            COLLECTION_BLOG_POSTS,
            blog_id,
            {"commentCount": as_int(post.get("commentCount")) + 1},
            token=token,
        )
        return self._to_result(doc)

    async def like_comment(
        self, comment_id: str, user_id: str, token: str | None = None
    ) -> CommentResult:
        """Add user_id to likedBy and bump likes; a repeat like changes nothing."""
        doc = await self._client.get(COLLECTION_BLOG_COMMENTS, comment_id, token=token)
        current = self._to_result(doc)
        if user_id in current.liked_by:
            return current
        doc = await self._client.patch(
            COLLECTION_BLOG_COMMENTS,
            comment_id,
            {"likes": current.likes + 1, "likedBy": [*current.liked_by, user_id]},
            token=token,
        )
        return self._to_result(doc)

    async def unlike_comment(
        self, comment_id: str, user_id: str, token: str | None = None
    ) -> CommentResult:
        """Remove user_id from likedBy and drop likes (never below zero)."""
        doc = await self._client.get(COLLECTION_BLOG_COMMENTS, comment_id, token=token)
        current = self._to_result(doc)
        if user_id not in current.liked_by:
            return current
        doc = await self._client.patch(
            COLLECTION_BLOG_COMMENTS,
            comment_id,
            {
                "likes": max(current.likes - 1, 0),
                "likedBy": [u for u in current.liked_by if u != user_id],
            },
            token=token,
        )
        return self._to_result(doc)

    async def delete_comment(self, comment_id: str, token: str | None = None) -> None:
        await self._client.delete(COLLECTION_BLOG_COMMENTS, comment_id, token=token)

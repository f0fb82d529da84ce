"""Unit tests for the Firestore content repositories and client-side counters."""

import pytest

from folio.domain.exceptions import DocumentNotFoundException
from folio.infrastructure.firebase.counters import as_int, increment_field
from folio.infrastructure.firebase.repositories import (
    FirestoreBlogPostRepository,
    FirestoreCommentRepository,
    FirestoreProfileRepository,
    FirestoreProjectRepository,
    FirestoreTestimonialRepository,
    FirestoreVisitorStatsRepository,
)
from tests.firestore_fakes import DOCS_PATH, json_body, wire_doc


def _project_fields(title: str, is_public: bool) -> dict:
    return {
        "title": {"stringValue": title},
        "isPublic": {"booleanValue": is_public},
        "tags": {"arrayValue": {"values": [{"stringValue": "React"}]}},
        "createdAt": {"stringValue": "2024-01-01T00:00:00.000Z"},
    }


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, 3), (2.0, 2), ("7", 7), ("", 0), ("abc", 0), (True, 0), (None, 0)],
)
def test_as_int(value, expected) -> None:
    assert as_int(value) == expected


async def test_increment_field_reads_then_patches_only_that_field(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("blog_posts", "p1", {"views": {"integerValue": "41"}, "title": {"stringValue": "T"}}))
    fake_store.respond(200, wire_doc("blog_posts", "p1", {"views": {"integerValue": "42"}}))

    new_value = await increment_field(firestore, "blog_posts", "p1", "views")

    assert new_value == 42
    patch_req = fake_store.last
    assert patch_req.method == "PATCH"
    assert patch_req.url.params.get_list("updateMask.fieldPaths") == ["views"]
    assert json_body(patch_req) == {"fields": {"views": {"integerValue": "42"}}}


async def test_increment_field_treats_absent_counter_as_zero(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("blog_posts", "p1"))
    fake_store.respond(200, wire_doc("blog_posts", "p1", {"likes": {"integerValue": "1"}}))
    assert await increment_field(firestore, "blog_posts", "p1", "likes") == 1


async def test_list_projects_hides_private_by_default(firestore, fake_store) -> None:
    docs = {"documents": [
        wire_doc("projects", "a", _project_fields("Public", True)),
        wire_doc("projects", "b", _project_fields("Private", False)),
    ]}
    fake_store.respond(200, docs).respond(200, docs)
    repo = FirestoreProjectRepository(firestore)

    public = await repo.list_projects()
    everything = await repo.list_projects(include_private=True)

    assert fake_store.last.url.params["orderBy"] == "createdAt desc"
    assert [p.id for p in public] == ["a"]
    assert public[0].tags == ["React"]
    assert public[0].github_url == ""
    assert [p.title for p in everything] == ["Public", "Private"]


async def test_get_project_missing_returns_none(firestore, fake_store) -> None:
    fake_store.respond(404, {"error": {"status": "NOT_FOUND"}})
    assert await FirestoreProjectRepository(firestore).get_by_id("nope") is None


async def test_create_project_sends_camel_case_fields(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("projects", "new1", _project_fields("Demo", True)))
    repo = FirestoreProjectRepository(firestore)

    result = await repo.create_project(
        title="Demo",
        description="d",
        image="img",
        category="web",
        tags=["React"],
        is_public=True,
        token="admin-token",
    )

    fields = json_body(fake_store.last)["fields"]
    assert fields["isPublic"] == {"booleanValue": True}
    assert fields["githubUrl"] == {"stringValue": ""}
    assert "createdAt" in fields
    assert fake_store.last.headers["Authorization"] == "Bearer admin-token"
    assert result.id == "new1"


async def test_get_post_by_slug(firestore, fake_store) -> None:
    fake_store.respond(200, [{"document": wire_doc("blog_posts", "p1", {
        "title": {"stringValue": "Hello"},
        "slug": {"stringValue": "hello"},
        "isPublic": {"booleanValue": True},
        "showComments": {"booleanValue": False},
        "views": {"integerValue": "10"},
    })}])

    post = await FirestoreBlogPostRepository(firestore).get_by_slug("hello")

    body = json_body(fake_store.last)["structuredQuery"]
    assert body["where"]["fieldFilter"]["field"] == {"fieldPath": "slug"}
    assert body["limit"] == 1
    assert post is not None
    assert post.title == "Hello"
    assert post.show_comments is False
    assert post.views == 10
    assert post.comment_count == 0


async def test_get_post_by_slug_no_match(firestore, fake_store) -> None:
    fake_store.respond(200, [{"readTime": "2024-01-01T00:00:00Z"}])
    assert await FirestoreBlogPostRepository(firestore).get_by_slug("missing") is None


async def test_post_show_comments_defaults_to_true(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("blog_posts", "old", {"title": {"stringValue": "Old"}}))
    post = await FirestoreBlogPostRepository(firestore).get_by_id("old")
    assert post is not None
    assert post.show_comments is True


async def test_list_published_filters_and_orders(firestore, fake_store) -> None:
    fake_store.respond(200, [{"readTime": "t"}])
    assert await FirestoreBlogPostRepository(firestore).list_published(limit=3) == []
    body = json_body(fake_store.last)["structuredQuery"]
    assert body["where"]["fieldFilter"]["value"] == {"booleanValue": True}
    assert body["orderBy"] == [{"field": {"fieldPath": "date"}, "direction": "DESCENDING"}]
    assert body["limit"] == 3


async def test_like_missing_post_raises_not_found(firestore, fake_store) -> None:
    fake_store.respond(404, {"error": {"status": "NOT_FOUND"}})
    with pytest.raises(DocumentNotFoundException):
        await FirestoreBlogPostRepository(firestore).like("gone")


async def test_add_comment_creates_and_bumps_comment_count(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("blog_posts", "p1", {"commentCount": {"integerValue": "2"}}))
    fake_store.respond(200, wire_doc("blog_comments", "c1", {
        "blogId": {"stringValue": "p1"},
        "content": {"stringValue": "Nice"},
        "isAdmin": {"booleanValue": False},
    }))
    fake_store.respond(200, wire_doc("blog_posts", "p1", {"commentCount": {"integerValue": "3"}}))

    comment = await FirestoreCommentRepository(firestore).add_comment(
        blog_id="p1", user_id="u1", user_display_name="Ada", content="Nice", token="tok"
    )

    get_req, create_req, patch_req = fake_store.requests
    assert get_req.url.path == f"{DOCS_PATH}/blog_posts/p1"
    assert create_req.url.path == f"{DOCS_PATH}/blog_comments"
    assert "parentId" not in json_body(create_req)["fields"]
    assert patch_req.url.params.get_list("updateMask.fieldPaths") == ["commentCount"]
    assert json_body(patch_req) == {"fields": {"commentCount": {"integerValue": "3"}}}
    assert comment.id == "c1"
    assert comment.parent_id is None


async def test_add_comment_on_missing_post_writes_nothing(firestore, fake_store) -> None:
    fake_store.respond(404, {"error": {"status": "NOT_FOUND"}})

    with pytest.raises(DocumentNotFoundException):
        await FirestoreCommentRepository(firestore).add_comment(
            blog_id="gone", user_id="u1", user_display_name="Ada", content="Hi"
        )

    assert [r.method for r in fake_store.requests] == ["GET"]


async def test_like_comment_appends_user_and_bumps_likes(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("blog_comments", "c1", {
        "likes": {"integerValue": "1"},
        "likedBy": {"arrayValue": {"values": [{"stringValue": "u0"}]}},
    }))
    fake_store.respond(200, wire_doc("blog_comments", "c1", {
        "likes": {"integerValue": "2"},
        "likedBy": {"arrayValue": {"values": [{"stringValue": "u0"}, {"stringValue": "u1"}]}},
    }))

    comment = await FirestoreCommentRepository(firestore).like_comment("c1", "u1", token="tok")

    patch_req = fake_store.last
    assert patch_req.url.params.get_list("updateMask.fieldPaths") == ["likes", "likedBy"]
    assert json_body(patch_req)["fields"]["likedBy"] == {
        "arrayValue": {"values": [{"stringValue": "u0"}, {"stringValue": "u1"}]}
    }
    assert (comment.likes, comment.liked_by) == (2, ["u0", "u1"])


async def test_repeat_like_does_not_write(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("blog_comments", "c1", {
        "likes": {"integerValue": "1"},
        "likedBy": {"arrayValue": {"values": [{"stringValue": "u1"}]}},
    }))
    comment = await FirestoreCommentRepository(firestore).like_comment("c1", "u1")
    assert [r.method for r in fake_store.requests] == ["GET"]
    assert comment.likes == 1


async def test_unlike_comment_removes_user(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("blog_comments", "c1", {
        "likes": {"integerValue": "1"},
        "likedBy": {"arrayValue": {"values": [{"stringValue": "u1"}]}},
    }))
    fake_store.respond(200, wire_doc("blog_comments", "c1", {
        "likes": {"integerValue": "0"},
        "likedBy": {"arrayValue": {}},
    }))

    comment = await FirestoreCommentRepository(firestore).unlike_comment("c1", "u1")

    assert json_body(fake_store.last) == {"fields": {
        "likes": {"integerValue": "0"},
        "likedBy": {"arrayValue": {"values": []}},
    }}
    assert comment.liked_by == []


async def test_list_comments_for_post(firestore, fake_store) -> None:
    fake_store.respond(200, [
        {"document": wire_doc("blog_comments", "c1", {"parentId": {"stringValue": "c0"}})},
        {"document": wire_doc("blog_comments", "c0", {"likedBy": {"arrayValue": {}}})},
    ])
    comments = await FirestoreCommentRepository(firestore).list_for_post("p1")
    assert [c.id for c in comments] == ["c1", "c0"]
    assert comments[0].parent_id == "c0"
    assert comments[1].liked_by == []


async def test_profile_missing_returns_none(firestore, fake_store) -> None:
    fake_store.respond(404, {"error": {"status": "NOT_FOUND"}})
    assert await FirestoreProfileRepository(firestore).get_profile("u1") is None


async def test_save_profile_creates_on_first_save(firestore, fake_store) -> None:
    fake_store.respond(404, {"error": {"status": "NOT_FOUND"}})
    fake_store.respond(200, wire_doc("profiles", "u1", {"bio": {"stringValue": "Hi"}}))

    profile = await FirestoreProfileRepository(firestore).save_profile("u1", {"bio": "Hi"}, token="tok")

    patch_req, create_req = fake_store.requests
    assert patch_req.method == "PATCH"
    assert patch_req.url.params.get_list("updateMask.fieldPaths") == ["bio", "updatedAt"]
    assert create_req.method == "POST"
    assert create_req.url.params["documentId"] == "u1"
    assert profile.bio == "Hi"
    assert profile.location == ""


async def test_submit_testimonial_is_hidden(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("testimonials", "t1", {
        "rating": {"integerValue": "5"},
        "isVisible": {"booleanValue": False},
    }))
    result = await FirestoreTestimonialRepository(firestore).submit(
        user_id="u1", user_display_name="Ada", content="Great", rating=5
    )
    assert json_body(fake_store.last)["fields"]["isVisible"] == {"booleanValue": False}
    assert result.rating == 5
    assert result.is_visible is False


async def test_visitor_stats_zero_before_first_visit(firestore, fake_store) -> None:
    fake_store.respond(404, {"error": {"status": "NOT_FOUND"}})
    stats = await FirestoreVisitorStatsRepository(firestore).get_stats()
    assert (stats.total_visits, stats.guest_visits, stats.user_visits) == (0, 0, 0)


async def test_first_visit_creates_stats_document(firestore, fake_store) -> None:
    fake_store.respond(404, {"error": {"status": "NOT_FOUND"}})
    fake_store.respond(200, wire_doc("stats", "visitors", {
        "totalVisits": {"integerValue": "1"},
        "guestVisits": {"integerValue": "1"},
        "userVisits": {"integerValue": "0"},
    }))

    stats = await FirestoreVisitorStatsRepository(firestore).record_visit(is_user=False)

    create_req = fake_store.last
    assert create_req.url.params["documentId"] == "visitors"
    assert json_body(create_req)["fields"]["guestVisits"] == {"integerValue": "1"}
    assert stats.total_visits == 1


async def test_user_visit_increments_total_and_user_counts(firestore, fake_store) -> None:
    fake_store.respond(200, wire_doc("stats", "visitors", {
        "totalVisits": {"integerValue": "10"},
        "userVisits": {"integerValue": "4"},
        "guestVisits": {"integerValue": "6"},
    }))
    fake_store.respond(200, wire_doc("stats", "visitors", {
        "totalVisits": {"integerValue": "11"},
        "userVisits": {"integerValue": "5"},
        "guestVisits": {"integerValue": "6"},
    }))

    stats = await FirestoreVisitorStatsRepository(firestore).record_visit(is_user=True)

    patch_req = fake_store.last
    assert patch_req.url.params.get_list("updateMask.fieldPaths") == [
        "totalVisits",
        "userVisits",
        "lastUpdated",
    ]
    assert (stats.total_visits, stats.user_visits, stats.guest_visits) == (11, 5, 6)


async def test_concurrent_first_visit_falls_back_to_increment(firestore, fake_store) -> None:
    fake_store.respond(404, {"error": {"status": "NOT_FOUND"}})
    fake_store.respond(409, {"error": {"status": "ALREADY_EXISTS"}})
    fake_store.respond(200, wire_doc("stats", "visitors", {"totalVisits": {"integerValue": "1"}}))
    fake_store.respond(200, wire_doc("stats", "visitors", {"totalVisits": {"integerValue": "2"}}))

    stats = await FirestoreVisitorStatsRepository(firestore).record_visit(is_user=False)

    assert [r.method for r in fake_store.requests] == ["GET", "POST", "GET", "PATCH"]
    assert stats.total_visits == 2

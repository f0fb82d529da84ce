"""DTOs for blog posts and their comments."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BlogPostResult:
    """Blog post read-model. Counters are client-maintained (see counters.increment_field)."""

    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    date: str
    category: str
    author: str
    image: str
    is_public: bool
    show_comments: bool = True
    tags: list[str] = field(default_factory=list)
    views: int = 0
    likes: int = 0
    shares: int = 0
    comment_count: int = 0


@dataclass(frozen=True)
class CommentResult:
    """Comment on a blog post; parent_id is set for replies."""

    id: str
    blog_id: str
    user_id: str
    user_display_name: str
    content: str
    created_at: str
    parent_id: str | None = None
    is_admin: bool = False
    likes: int = 0
    liked_by: list[str] = field(default_factory=list)

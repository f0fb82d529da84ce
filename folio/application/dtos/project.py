"""DTOs for portfolio projects."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProjectResult:
    """Project read-model (result of list_projects, get_by_id, create_project)."""

    id: str
    title: str
    description: str
    image: str
    category: str
    is_public: bool
    tags: list[str] = field(default_factory=list)
    github_url: str = ""
    live_url: str = ""
    created_at: str = ""

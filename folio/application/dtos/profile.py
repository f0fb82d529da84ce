"""DTOs for user profiles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileResult:
    """Profile read-model; missing fields read as empty strings."""

    user_id: str
    display_name: str
    bio: str
    location: str
    phone: str
    website: str
    photo_url: str

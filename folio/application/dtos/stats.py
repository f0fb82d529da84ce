"""DTOs for site visitor statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VisitorStatsResult:
    total_visits: int
    guest_visits: int
    user_visits: int
    last_updated: str = ""

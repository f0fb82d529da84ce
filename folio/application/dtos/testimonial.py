"""DTOs for testimonials (reviews)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TestimonialResult:
    """Testimonial read-model. Hidden until an admin sets is_visible."""

    id: str
    user_id: str
    user_display_name: str
    content: str
    rating: int
    is_visible: bool
    created_at: str
    user_location: str = ""

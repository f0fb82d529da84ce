"""DTOs for contact form messages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactMessageResult:
    """Message left through the contact form; flags are set from the admin inbox."""

    id: str
    name: str
    email: str
    subject: str
    message: str
    status: str
    created_at: str
    is_read: bool = False
    is_starred: bool = False

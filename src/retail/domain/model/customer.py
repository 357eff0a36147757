"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass

from retail.domain.exceptions import ValidationError


@dataclass
class Customer:
    """A registered customer.

    The ``id`` is the identity and never changes; name and email may be
    corrected through the ``update_*`` methods.
    """

    id: int
    name: str
    email: str

    def update_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        self.name = name.strip()

    def update_email(self, email: str) -> None:
        if not email or not email.strip():
            raise ValidationError("Customer email is required")
        self.email = email.strip()

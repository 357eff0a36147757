"""Category value object: a tag attached to products."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """Immutable product category.

    Products only borrow a reference to a category; its lifetime is
    independent of any product that points at it.
    """

    id: int
    name: str

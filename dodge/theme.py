"""Available site themes."""

from __future__ import annotations

from enum import Enum


class Theme(Enum):
    """A visual theme for generated pages."""

    VERCEL = "vercel"
    HACKER = "hacker"

    def __str__(self) -> str:
        return self.value


def parse_theme(name: str) -> Theme:
    """Return the theme with the given name, ignoring case."""
    try:
        return Theme(name.lower())
    except ValueError:
        raise ValueError(
            f"Unknown theme: {name}. Available themes: vercel, hacker"
        ) from None
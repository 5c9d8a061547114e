"""Data models for td."""

from __future__ import annotations

from dataclasses import dataclass, field

from td.core.styles import Format


@dataclass
class PrimaryItem:
    """A primary todo item with its secondary items and display format."""

    name: str
    secondaries: set[str] = field(default_factory=set)
    format: Format | None = None

    @property
    def has_secondaries(self) -> bool:
        return bool(self.secondaries)

    def sorted_secondaries(self) -> list[str]:
        """Return secondary names in lexicographic order."""
        return sorted(self.secondaries)

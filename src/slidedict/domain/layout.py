"""Keyboard layout model.

A KeyLayout maps every key character to the center of its key. It is built
once per run and then only read, so it can be shared freely between the
extraction of many words and shipped to worker processes as a dict.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from slidedict.domain.point import Point


@dataclass(frozen=True)
class LayoutRow:
    """A row of keys in document order.

    Attributes:
        keys: Key characters from left to right
        offset: Horizontal offset of the first key's left edge
    """

    keys: tuple[str, ...]
    offset: int = 0


@dataclass(frozen=True)
class KeyLayout:
    """Read-only mapping from key character to key center.

    Attributes:
        positions: Character to key center mapping
        key_width: Width of a key in layout units
        key_height: Height of a key in layout units
    """

    positions: Mapping[str, Point]
    key_width: int
    key_height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "positions", MappingProxyType(dict(self.positions)))

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[LayoutRow],
        key_width: int,
        key_height: int,
    ) -> "KeyLayout":
        """Compute key centers for rows of keys.

        Row ``i`` and key ``j`` within it map to
        ``x = offset + key_width // 2 + j * key_width`` and
        ``y = key_height // 2 + i * key_width``. The row pitch is the key
        width, not the key height; existing dictionaries depend on it.
        A character appearing twice keeps its last position.

        Args:
            rows: Rows from top to bottom
            key_width: Width of a key
            key_height: Height of a key

        Returns:
            KeyLayout instance
        """
        positions: dict[str, Point] = {}
        for i, row in enumerate(rows):
            for j, char in enumerate(row.keys):
                x = row.offset + key_width // 2 + j * key_width
                y = key_height // 2 + i * key_width
                positions[char] = Point(x, y)
        return cls(positions=positions, key_width=key_width, key_height=key_height)

    def position(self, char: str) -> Point | None:
        """Get the key center for a character, or None if it has no key."""
        return self.positions.get(char)

    def __contains__(self, char: object) -> bool:
        return char in self.positions

    def __iter__(self) -> Iterator[str]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "key_width": self.key_width,
            "key_height": self.key_height,
            "positions": {char: p.to_dict() for char, p in self.positions.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KeyLayout":
        """Deserialize from dictionary."""
        return cls(
            positions={
                char: Point.from_dict(p) for char, p in data["positions"].items()
            },
            key_width=data["key_width"],
            key_height=data["key_height"],
        )

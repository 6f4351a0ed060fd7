"""Domain models for slidedict.

This module contains the value types shared by the pipeline. All models are
designed to be:

- Immutable (frozen dataclasses, read-only mappings)
- Serializable for inter-process communication (parallel processing)
- Independent of the document formats they are read from

Key classes:
- Point: A 2D point in layout units
- LayoutRow: One row of keys as described by a layout document
- KeyLayout: Character to key-center mapping for a keyboard
- FeatureVector: Slide parameters of a single word
"""

from slidedict.domain.features import FeatureVector
from slidedict.domain.layout import KeyLayout, LayoutRow
from slidedict.domain.point import Point

__all__: list[str] = [
    "FeatureVector",
    "KeyLayout",
    "LayoutRow",
    "Point",
]

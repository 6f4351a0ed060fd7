"""Keyboard layout reader.

A layout document looks like::

    <keyboard keyWidth="10" keyHeight="10">
        <row offset="0">
            <key char="q"/>
            <key char="w"/>
        </row>
    </keyboard>

Rows are taken in document order from anywhere below the root element, and
keys in document order within their row.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from slidedict.domain import KeyLayout, LayoutRow
from slidedict.exceptions import LayoutLoadError


def _get_integer(element: ET.Element, attr: str, default: int | None = None) -> int:
    value = element.get(attr)
    if value is None:
        if default is None:
            raise ValueError(f"<{element.tag}> is missing attribute '{attr}'")
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(
            f"<{element.tag}> attribute '{attr}' is not an integer: {value!r}"
        ) from None


def parse_layout(root: ET.Element) -> KeyLayout:
    """Build a KeyLayout from a parsed layout document.

    Args:
        root: Root element carrying keyWidth and keyHeight

    Returns:
        KeyLayout with one position per key character

    Raises:
        ValueError: If a required attribute is missing or not an integer
    """
    key_width = _get_integer(root, "keyWidth")
    key_height = _get_integer(root, "keyHeight")

    rows = []
    for row_el in root.iter("row"):
        keys = tuple(key_el.get("char", "") for key_el in row_el.iter("key"))
        rows.append(LayoutRow(keys=keys, offset=_get_integer(row_el, "offset", 0)))

    return KeyLayout.from_rows(rows, key_width=key_width, key_height=key_height)


class KeyboardLayoutReader:
    """Loads a keyboard layout document.

    Example:
        layout = KeyboardLayoutReader(Path("qwerty.xml")).load()
        print(layout.position("q"))
    """

    def __init__(self, layout_path: Path) -> None:
        """Initialize the layout reader.

        Args:
            layout_path: Path to the layout XML file
        """
        self._layout_path = layout_path

    def load(self) -> KeyLayout:
        """Parse the layout file.

        Returns:
            KeyLayout for the document

        Raises:
            LayoutLoadError: If the file is missing, not XML, or malformed
        """
        if not self._layout_path.exists():
            raise LayoutLoadError(str(self._layout_path), "file not found")

        try:
            root = ET.parse(self._layout_path).getroot()
            return parse_layout(root)
        except (ET.ParseError, ValueError, OSError) as e:
            raise LayoutLoadError(str(self._layout_path), str(e)) from e

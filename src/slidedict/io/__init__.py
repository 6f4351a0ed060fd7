"""Input/output layer for slidedict.

This module handles reading keyboard layouts and word lists and writing
dictionary rows. It keeps document formats out of the domain models.

Key responsibilities:
- Parse keyboard layout XML into a KeyLayout
- Read word lists (XML or plain text)
- Format feature vectors as tab-separated dictionary rows

Key classes:
- KeyboardLayoutReader: Load keyboard layouts
- WordListReader: Load word lists
- SlideDictionaryWriter: Write dictionary rows
"""

from slidedict.io.layout import KeyboardLayoutReader
from slidedict.io.wordlist import WordListReader
from slidedict.io.writer import SlideDictionaryWriter, format_parameters, format_row

__all__ = [
    "KeyboardLayoutReader",
    "SlideDictionaryWriter",
    "WordListReader",
    "format_parameters",
    "format_row",
]

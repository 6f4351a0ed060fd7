"""Word list reader.

XML word lists hold one ``<w>`` element per word, in order; any other
elements are ignored::

    <wordlist>
        <w f="255">the</w>
        <w f="254">of</w>
    </wordlist>

Files with a ``.txt`` suffix hold one word per line.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from slidedict.exceptions import WordListLoadError

TEXT_SUFFIXES = frozenset({".txt"})


class WordListReader:
    """Loads the words of a word list file.

    Example:
        words = WordListReader(Path("words.xml")).load()
    """

    def __init__(self, wordlist_path: Path) -> None:
        """Initialize the word list reader.

        Args:
            wordlist_path: Path to the XML or text word list
        """
        self._wordlist_path = wordlist_path

    @property
    def is_text(self) -> bool:
        """Whether the file is read as plain text instead of XML."""
        return self._wordlist_path.suffix.lower() in TEXT_SUFFIXES

    def load(self) -> list[str]:
        """Read all words in file order.

        Returns:
            List of words; empty ``<w/>`` elements yield empty strings

        Raises:
            WordListLoadError: If the file is missing or cannot be parsed
        """
        if not self._wordlist_path.exists():
            raise WordListLoadError(str(self._wordlist_path), "file not found")

        try:
            if self.is_text:
                return self._load_text()
            return self._load_xml()
        except (ET.ParseError, UnicodeDecodeError, OSError) as e:
            raise WordListLoadError(str(self._wordlist_path), str(e)) from e

    def _load_xml(self) -> list[str]:
        root = ET.parse(self._wordlist_path).getroot()
        return [w.text or "" for w in root.iter("w")]

    def _load_text(self) -> list[str]:
        with self._wordlist_path.open(encoding="utf-8") as f:
            return [line.strip() for line in f if line.strip()]

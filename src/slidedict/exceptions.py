"""Exception hierarchy for Slidedict."""


class SlideDictError(Exception):
    """Base exception for all Slidedict errors."""

    pass


class InputError(SlideDictError):
    """Errors related to reading input documents."""

    pass


class LayoutLoadError(InputError):
    """Error loading a keyboard layout file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load keyboard layout '{path}': {reason}")


class WordListLoadError(InputError):
    """Error loading a word list file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load word list '{path}': {reason}")


class TransformException(SlideDictError):
    """Errors raised by the wavelet transforms."""

    pass


class TransformError(TransformException):
    """Invalid transform input; not recoverable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class WordError(SlideDictError):
    """A word has no slide parameters. Skipped without aborting the batch."""

    def __init__(self, word: str, reason: str) -> None:
        self.word = word
        self.reason = reason
        super().__init__(f"No slide parameters for '{word}': {reason}")


class DegenerateWordError(WordError):
    """Word is empty after normalization or maps to fewer than two keys."""

    pass


class UnmappedCharacterError(WordError):
    """Word contains a character with no key in the layout."""

    def __init__(self, word: str, char: str) -> None:
        self.char = char
        super().__init__(word, f"no key for character '{char}'")

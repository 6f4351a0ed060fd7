"""Slidedict - Build gesture-typing slide dictionaries from keyboard layouts.

Slidedict converts each word of a word list into a fixed-length feature vector
("slide parameters") describing the path traced by sliding a finger across a
keyboard layout to spell the word. The path is resampled by arc length and
compressed with a discrete wavelet transform.

Example:
    $ slidedict keyboard.xml words.xml > slide.dict

Each output row holds the word followed by 17 tab-separated parameters.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

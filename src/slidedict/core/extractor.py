"""Slide-parameter extraction for single words.

Turns a word into the feature vector describing the path a finger slides
along when spelling it on a keyboard:

1. Normalize the word (ASCII letters only, lower case)
2. Map each character to its key center
3. Resample the x and y signals by arc length
4. Wavelet-transform both signals with the ancient Egyptian decomposition
5. Keep the leading coefficients of each axis behind a reserved zero slot

Extraction is a pure function of the word and the layout. Words without slide
parameters raise a WordError subclass so that batch callers can report and
skip them.
"""

import re

import numpy as np
import structlog

from slidedict.config import FeatureConfig, ResampleConfig, TransformKind
from slidedict.core.decomposition import AncientEgyptianDecomposition
from slidedict.core.geometry import polygon_length, polyline_coordinates, segment_lengths
from slidedict.core.resample import resample
from slidedict.core.transforms import FastWaveletTransform, Transform, WaveletPacketTransform
from slidedict.core.wavelets import get_wavelet
from slidedict.domain import FeatureVector, KeyLayout, Point
from slidedict.exceptions import DegenerateWordError, UnmappedCharacterError

logger = structlog.get_logger(__name__)

_NON_ALPHA = re.compile(r"[^a-zA-Z]")


def normalize_word(word: str) -> str:
    """Drop every character outside the ASCII alphabet and lower-case the rest.

    Accented letters are dropped rather than decomposed.

    Examples:
        >>> normalize_word("Don't")
        'dont'
    """
    return _NON_ALPHA.sub("", word).lower()


def build_transform(config: FeatureConfig) -> AncientEgyptianDecomposition:
    """Create the arbitrary-length transform described by the configuration."""
    wavelet = get_wavelet(config.wavelet.value)
    inner: Transform
    if config.transform is TransformKind.FAST:
        inner = FastWaveletTransform(wavelet)
    elif config.transform is TransformKind.PACKET:
        inner = WaveletPacketTransform(wavelet)
    else:
        inner = wavelet
    return AncientEgyptianDecomposition(inner)


class SlideParameterExtractor:
    """Computes slide parameters for words on one keyboard layout.

    Stateless apart from its configuration; one instance can serve any
    number of words, also from several threads.

    Example:
        extractor = SlideParameterExtractor(layout)
        vector = extractor.extract("hello")
    """

    def __init__(
        self,
        layout: KeyLayout,
        features: FeatureConfig | None = None,
        resampling: ResampleConfig | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            layout: Key centers of the keyboard
            features: Transform and vector settings (defaults if None)
            resampling: Resampling settings (defaults if None)
        """
        self.layout = layout
        self.features = features or FeatureConfig()
        self.resampling = resampling or ResampleConfig()
        if self.features.coefficient_count > self.resampling.sample_count:
            raise ValueError(
                f"coefficient_count ({self.features.coefficient_count}) exceeds "
                f"sample_count ({self.resampling.sample_count})"
            )
        self.transform = build_transform(self.features)

    def points(self, word: str) -> list[Point]:
        """Map the normalized word to the key centers it passes through.

        Args:
            word: Raw word

        Returns:
            One point per character of the normalized word, in order

        Raises:
            UnmappedCharacterError: If a character has no key in the layout
        """
        result = []
        for char in normalize_word(word):
            point = self.layout.position(char)
            if point is None:
                raise UnmappedCharacterError(word, char)
            result.append(point)
        return result

    def resampled_path(self, word: str) -> tuple[np.ndarray, np.ndarray]:
        """Resample the word's path to a fixed number of points per axis.

        Args:
            word: Raw word

        Returns:
            Tuple of (xs, ys), each with ``sample_count`` values

        Raises:
            DegenerateWordError: If the word normalizes to fewer than 2 keys
            UnmappedCharacterError: If a character has no key in the layout
        """
        if not normalize_word(word):
            raise DegenerateWordError(word, "no letters after normalization")

        points = self.points(word)
        if len(points) < 2:
            raise DegenerateWordError(word, "single-letter words have no path")

        xs, ys = polyline_coordinates(points)
        lengths = segment_lengths(xs, ys)
        logger.debug(
            "Word path",
            word=word,
            points=len(points),
            length=round(polygon_length(xs, ys), 3),
        )

        n = self.resampling.sample_count
        return resample(xs, lengths, n), resample(ys, lengths, n)

    def extract(self, word: str) -> FeatureVector:
        """Compute the slide parameters of a word.

        Args:
            word: Raw word

        Returns:
            FeatureVector of ``1 + 2 * coefficient_count`` values; slot 0 is 0.0

        Raises:
            DegenerateWordError: If the word normalizes to fewer than 2 keys
            UnmappedCharacterError: If a character has no key in the layout
        """
        xs, ys = self.resampled_path(word)
        level = self.features.level
        return FeatureVector.assemble(
            self.transform.forward(xs, level),
            self.transform.forward(ys, level),
            self.features.coefficient_count,
        )


def extract_slide_parameters(
    word: str,
    layout: KeyLayout,
    features: FeatureConfig | None = None,
    resampling: ResampleConfig | None = None,
) -> FeatureVector:
    """Compute the slide parameters of one word.

    Convenience wrapper around SlideParameterExtractor for single lookups.

    Raises:
        DegenerateWordError: If the word normalizes to fewer than 2 keys
        UnmappedCharacterError: If a character has no key in the layout
    """
    return SlideParameterExtractor(layout, features, resampling).extract(word)

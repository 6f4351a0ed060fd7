"""Tests for slide-parameter extraction."""

import numpy as np
import pytest

from slidedict.config import FeatureConfig, ResampleConfig, TransformKind, WaveletName
from slidedict.core.decomposition import AncientEgyptianDecomposition
from slidedict.core.extractor import (
    SlideParameterExtractor,
    build_transform,
    extract_slide_parameters,
    normalize_word,
)
from slidedict.core.transforms import FastWaveletTransform, WaveletPacketTransform
from slidedict.core.wavelets import Daubechies04, Haar02
from slidedict.domain import KeyLayout, LayoutRow, Point
from slidedict.exceptions import DegenerateWordError, UnmappedCharacterError, WordError


@pytest.fixture
def abc_layout() -> KeyLayout:
    """Single row a, b, c with 10-unit keys: centers (5,5), (15,5), (25,5)."""
    return KeyLayout.from_rows([LayoutRow(keys=("a", "b", "c"))], key_width=10, key_height=10)


@pytest.fixture
def qwerty_layout() -> KeyLayout:
    """Three-row QWERTY letter block."""
    rows = [
        LayoutRow(keys=tuple("qwertyuiop")),
        LayoutRow(keys=tuple("asdfghjkl"), offset=5),
        LayoutRow(keys=tuple("zxcvbnm"), offset=15),
    ]
    return KeyLayout.from_rows(rows, key_width=10, key_height=10)


@pytest.fixture
def extractor(abc_layout) -> SlideParameterExtractor:
    return SlideParameterExtractor(abc_layout)


class TestNormalizeWord:
    """Tests for word normalization."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("Cat", "cat"),
            ("c a t !", "cat"),
            ("Don't", "dont"),
            ("e-mail", "email"),
            ("café", "caf"),
            ("42", ""),
            ("", ""),
        ],
    )
    def test_normalize(self, word, expected):
        assert normalize_word(word) == expected


class TestBuildTransform:
    """Tests for transform construction from configuration."""

    def test_default_is_fast_haar(self):
        engine = build_transform(FeatureConfig())

        assert isinstance(engine, AncientEgyptianDecomposition)
        assert isinstance(engine.transform, FastWaveletTransform)
        assert isinstance(engine.transform.wavelet, Haar02)

    def test_packet(self):
        engine = build_transform(FeatureConfig(transform=TransformKind.PACKET))
        assert isinstance(engine.transform, WaveletPacketTransform)

    def test_single_filter_step(self):
        engine = build_transform(
            FeatureConfig(transform=TransformKind.FILTER, wavelet=WaveletName.DAUBECHIES4)
        )
        assert isinstance(engine.transform, Daubechies04)


class TestAbcScenario:
    """Sliding a-b-c along a single key row."""

    def test_resampled_path(self, extractor):
        """x runs evenly from key a to key c, y stays on the row."""
        xs, ys = extractor.resampled_path("abc")

        np.testing.assert_allclose(xs, np.linspace(5.0, 25.0, 64))
        np.testing.assert_allclose(ys, 5.0)

    def test_vector_layout(self, extractor):
        vector = extractor.extract("abc")

        assert len(vector) == 17
        assert vector[0] == 0.0

    def test_vector_values(self, extractor):
        """Scaled means, one horizontal slope term and nothing else."""
        vector = extractor.extract("abc")

        assert vector[1] == pytest.approx(120.0)
        assert vector[2] == pytest.approx(-2560.0 / 63.0)
        assert vector[9] == pytest.approx(40.0)
        np.testing.assert_allclose(vector.values[10:], 0.0, atol=1e-9)

    def test_reverse_direction_differs(self, extractor):
        """The path direction is part of the parameters."""
        forward = extractor.extract("abc")
        backward = extractor.extract("cba")

        assert forward[1] == pytest.approx(backward[1])
        assert forward[2] == pytest.approx(-backward[2])
        assert extractor.extract("ab") != extractor.extract("ba")

    def test_repeated_key_is_finite(self, extractor):
        """A path of zero length yields a constant signal, never NaN."""
        vector = extractor.extract("aaa")

        assert np.all(np.isfinite(vector.values))
        assert vector[1] == pytest.approx(40.0)
        assert vector[9] == pytest.approx(40.0)
        np.testing.assert_allclose(vector.x_coefficients[1:], 0.0, atol=1e-9)

    def test_deterministic(self, extractor):
        assert extractor.extract("cab") == extractor.extract("cab")


class TestNormalizationEquivalence:
    """Words that normalize alike have identical parameters."""

    def test_case_and_punctuation_ignored(self, qwerty_layout):
        extractor = SlideParameterExtractor(qwerty_layout)

        expected = extractor.extract("cat")

        assert extractor.extract("Cat") == expected
        assert extractor.extract("c a t !") == expected
        assert extractor.extract("CAT") == expected

    def test_points_follow_word_order(self, qwerty_layout):
        extractor = SlideParameterExtractor(qwerty_layout)
        assert extractor.points("Qa") == [Point(5, 5), Point(10, 15)]


class TestDegenerateWords:
    """Words without slide parameters."""

    @pytest.mark.parametrize("word", ["", "123", "!!", " "])
    def test_no_letters(self, extractor, word):
        with pytest.raises(DegenerateWordError, match="no letters"):
            extractor.extract(word)

    @pytest.mark.parametrize("word", ["a", "A", "a!"])
    def test_single_letter(self, extractor, word):
        with pytest.raises(DegenerateWordError, match="single-letter"):
            extractor.extract(word)

    def test_unmapped_character(self, extractor):
        with pytest.raises(UnmappedCharacterError) as exc_info:
            extractor.extract("bad")

        assert exc_info.value.char == "d"
        assert exc_info.value.word == "bad"
        assert isinstance(exc_info.value, WordError)

    def test_unmapped_character_in_points(self, extractor):
        with pytest.raises(UnmappedCharacterError, match="'z'"):
            extractor.points("az")


class TestConfiguration:
    """Tests for non-default extractor settings."""

    def test_coefficient_count(self, abc_layout):
        extractor = SlideParameterExtractor(abc_layout, FeatureConfig(coefficient_count=4))
        vector = extractor.extract("abc")

        assert len(vector) == 9
        assert vector[1] == pytest.approx(120.0)
        assert vector[5] == pytest.approx(40.0)

    def test_sample_count(self, abc_layout):
        extractor = SlideParameterExtractor(abc_layout, resampling=ResampleConfig(sample_count=16))
        xs, _ = extractor.resampled_path("abc")

        assert len(xs) == 16
        # Mean 15 scaled by sqrt(16)
        assert extractor.extract("abc")[1] == pytest.approx(60.0)

    def test_odd_sample_count(self, abc_layout):
        """Arbitrary sample counts go through the decomposition."""
        extractor = SlideParameterExtractor(abc_layout, resampling=ResampleConfig(sample_count=42))
        vector = extractor.extract("abc")

        assert len(vector) == 17
        assert np.all(np.isfinite(vector.values))

    @pytest.mark.parametrize("kind", list(TransformKind))
    @pytest.mark.parametrize("wavelet", list(WaveletName))
    def test_all_transform_variants(self, abc_layout, kind, wavelet):
        features = FeatureConfig(transform=kind, wavelet=wavelet)
        vector = SlideParameterExtractor(abc_layout, features).extract("abca")

        assert len(vector) == 17
        assert vector[0] == 0.0
        assert np.all(np.isfinite(vector.values))

    def test_level_bound(self, abc_layout):
        """A single level keeps pairwise sums in the leading slots."""
        extractor = SlideParameterExtractor(abc_layout, FeatureConfig(level=1))
        xs, _ = extractor.resampled_path("abc")

        vector = extractor.extract("abc")

        assert vector[1] == pytest.approx((xs[0] + xs[1]) / np.sqrt(2.0))

    def test_too_many_coefficients(self, abc_layout):
        with pytest.raises(ValueError, match="exceeds"):
            SlideParameterExtractor(
                abc_layout,
                FeatureConfig(coefficient_count=20),
                ResampleConfig(sample_count=16),
            )


class TestExtractSlideParameters:
    """Tests for the single-word convenience function."""

    def test_matches_extractor(self, abc_layout):
        vector = extract_slide_parameters("abc", abc_layout)
        assert vector == SlideParameterExtractor(abc_layout).extract("abc")

    def test_raises_word_error(self, abc_layout):
        with pytest.raises(WordError):
            extract_slide_parameters("a", abc_layout)

"""Tests for multi-level wavelet transforms."""

import math

import numpy as np
import pytest

from slidedict.core.transforms import FastWaveletTransform, Transform, WaveletPacketTransform
from slidedict.core.wavelets import Coiflet06, Daubechies04, Haar02
from slidedict.exceptions import TransformError

TRANSFORM_CLASSES = [FastWaveletTransform, WaveletPacketTransform]
WAVELET_CLASSES = [Haar02, Daubechies04, Coiflet06]


@pytest.fixture(params=TRANSFORM_CLASSES, ids=lambda cls: cls.__name__)
def transform_cls(request):
    """Each multi-level transform class."""
    return request.param


class TestLevelCount:
    """Tests for level_count bookkeeping."""

    @pytest.mark.parametrize(
        ("wavelet_cls", "length", "expected"),
        [
            (Haar02, 64, 6),
            (Haar02, 2, 1),
            (Haar02, 1, 0),
            (Daubechies04, 64, 5),
            (Daubechies04, 2, 0),
            (Coiflet06, 64, 4),
            (Coiflet06, 4, 0),
        ],
    )
    def test_full_decomposition(self, transform_cls, wavelet_cls, length, expected):
        """log2(length / wave_length) + 1 iterations."""
        assert transform_cls(wavelet_cls()).level_count(length) == expected

    def test_bounded_by_level(self, transform_cls):
        """A level bound caps the iterations."""
        transform = transform_cls(Haar02())
        assert transform.level_count(64, 2) == 2
        assert transform.level_count(64, 10) == 6
        assert transform.level_count(64, 0) == 0


class TestFastWaveletTransform:
    """Tests for the pyramidal transform."""

    def test_known_values(self):
        """Second level refilters only the approximation band."""
        s = 1.0 / math.sqrt(2.0)
        result = FastWaveletTransform(Haar02()).forward(np.array([1.0, 2.0, 3.0, 4.0]))
        np.testing.assert_allclose(result, [5.0, -2.0, -s, -s])

    def test_constant_signal(self):
        """A constant has one scaled-mean coefficient and zero details."""
        result = FastWaveletTransform(Haar02()).forward(np.full(64, 5.0))

        assert result[0] == pytest.approx(40.0)
        np.testing.assert_allclose(result[1:], 0.0, atol=1e-12)

    def test_first_level_equals_filter_step(self):
        """Level 1 is a single filter step."""
        signal = np.random.default_rng(3).normal(size=16)
        wavelet = Daubechies04()
        np.testing.assert_allclose(
            FastWaveletTransform(wavelet).forward(signal, 1), wavelet.forward(signal)
        )


class TestWaveletPacketTransform:
    """Tests for the packet transform."""

    def test_known_values(self):
        """Second level refilters both bands."""
        result = WaveletPacketTransform(Haar02()).forward(np.array([1.0, 2.0, 3.0, 4.0]))
        np.testing.assert_allclose(result, [5.0, -2.0, -1.0, 0.0], atol=1e-12)

    def test_differs_from_pyramidal(self):
        """Detail bands are decomposed further than in the FWT."""
        signal = np.arange(8.0) ** 2
        fwt = FastWaveletTransform(Haar02()).forward(signal)
        wpt = WaveletPacketTransform(Haar02()).forward(signal)

        np.testing.assert_allclose(wpt[:2], fwt[:2])
        assert not np.allclose(wpt[4:], fwt[4:])

    def test_constant_signal(self):
        """Only the first coefficient of a constant survives."""
        result = WaveletPacketTransform(Haar02()).forward(np.full(16, 2.0))
        assert result[0] == pytest.approx(8.0)
        np.testing.assert_allclose(result[1:], 0.0, atol=1e-12)


class TestRoundTrip:
    """Round-trip laws shared by both transforms."""

    @pytest.mark.parametrize("wavelet_cls", WAVELET_CLASSES)
    @pytest.mark.parametrize("length", [1, 2, 4, 8, 32, 64, 128])
    def test_full_round_trip(self, transform_cls, wavelet_cls, length):
        """reverse(forward(x)) reconstructs x."""
        transform = transform_cls(wavelet_cls())
        signal = np.random.default_rng(length).normal(size=length)

        restored = transform.reverse(transform.forward(signal))

        np.testing.assert_allclose(restored, signal, atol=1e-9)

    @pytest.mark.parametrize("level", range(8))
    def test_leveled_round_trip(self, transform_cls, level):
        """Reversing with the same level bound reconstructs x."""
        transform = transform_cls(Haar02())
        signal = np.random.default_rng(level).uniform(0, 100, size=64)

        restored = transform.reverse(transform.forward(signal, level), level)

        np.testing.assert_allclose(restored, signal, atol=1e-9)

    def test_level_zero_is_identity(self, transform_cls):
        signal = np.arange(16.0)
        result = transform_cls(Haar02()).forward(signal, 0)
        np.testing.assert_array_equal(result, signal)

    def test_input_not_modified(self, transform_cls):
        signal = np.arange(16.0)
        transform_cls(Haar02()).forward(signal)
        np.testing.assert_array_equal(signal, np.arange(16.0))


class TestValidation:
    """Tests for invalid input."""

    @pytest.mark.parametrize("length", [3, 5, 48, 63])
    def test_non_power_of_two_rejected(self, transform_cls, length):
        transform = transform_cls(Haar02())
        with pytest.raises(TransformError):
            transform.forward(np.zeros(length))
        with pytest.raises(TransformError):
            transform.reverse(np.zeros(length))

    def test_multi_dimensional_rejected(self, transform_cls):
        with pytest.raises(TransformError, match="1-D"):
            transform_cls(Haar02()).forward(np.zeros((4, 4)))

    def test_implements_transform_protocol(self, transform_cls):
        assert isinstance(transform_cls(Haar02()), Transform)
        assert isinstance(Haar02(), Transform)

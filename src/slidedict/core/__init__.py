"""Core processing algorithms for slidedict.

This module contains the core algorithms for:

- Geometry operations (distances, segment and polyline lengths)
- Arc-length resampling of polyline signals
- Wavelet filters and multi-level wavelet transforms
- Arbitrary-length transforms via the ancient Egyptian decomposition
- Slide-parameter extraction and batch orchestration

All transforms are:
- Stateless (safe for use in worker processes)
- Pure (inputs are never modified)

Key functions:
- resample: Resample a polyline signal by arc length
- ancient_egyptian_multipliers: Power-of-two decomposition of a length
- normalize_word: Reduce a word to lower-case ASCII letters
- forward_2d / reverse_2d / forward_3d / reverse_3d: Multi-axis transforms

Key classes:
- Haar02, Daubechies04, Coiflet06: Wavelet filters
- FastWaveletTransform, WaveletPacketTransform: Multi-level transforms
- AncientEgyptianDecomposition: Arbitrary-length transform engine
- SlideParameterExtractor: Computes feature vectors for words
- SlideDictionaryBuilder: Builds a dictionary from a word list
"""

from slidedict.core.decomposition import (
    AncientEgyptianDecomposition,
    ancient_egyptian_multipliers,
    multipliers_to_integer,
)
from slidedict.core.extractor import (
    SlideParameterExtractor,
    build_transform,
    extract_slide_parameters,
    normalize_word,
)
from slidedict.core.geometry import distance, polygon_length, segment_lengths
from slidedict.core.multidim import forward_2d, forward_3d, reverse_2d, reverse_3d
from slidedict.core.processor import SlideDictionaryBuilder, process_words
from slidedict.core.resample import resample
from slidedict.core.transforms import FastWaveletTransform, Transform, WaveletPacketTransform
from slidedict.core.wavelets import Coiflet06, Daubechies04, Haar02, Wavelet, get_wavelet

__all__ = [
    # Decomposition
    "AncientEgyptianDecomposition",
    "Coiflet06",
    "Daubechies04",
    # Transforms
    "FastWaveletTransform",
    # Wavelets
    "Haar02",
    # Processor
    "SlideDictionaryBuilder",
    # Extractor
    "SlideParameterExtractor",
    "Transform",
    "Wavelet",
    "WaveletPacketTransform",
    "ancient_egyptian_multipliers",
    "build_transform",
    # Geometry
    "distance",
    "extract_slide_parameters",
    "forward_2d",
    "forward_3d",
    "get_wavelet",
    "multipliers_to_integer",
    "normalize_word",
    "polygon_length",
    "process_words",
    "resample",
    "reverse_2d",
    "reverse_3d",
    "segment_lengths",
]

"""
Sample generators
Import concrete generators from their modules (naive, poly_blep, noise);
noise is not imported here.
"""

from .base import SampleGenerator, BUFFER_DTYPE
from .waveform import Waveform

__all__ = ['SampleGenerator', 'BUFFER_DTYPE', 'Waveform']

"""
phasor - Per-sample audio signal generation
Phase-accumulating oscillators (naive and polyBLEP band-limited) and
white/pink/brown noise, all behind one pull contract.

Noise lives in phasor.generators.noise and is only imported on demand.
"""

__version__ = "0.1.0"

from .generators.base import SampleGenerator, BUFFER_DTYPE
from .generators.waveform import Waveform
from .generators.naive import NaiveOsc
from .generators.poly_blep import PolyBlepOsc
from .generator_registry import GeneratorRegistry, get_registry
from .param_spec import InvalidParameterError

__all__ = [
    'SampleGenerator', 'BUFFER_DTYPE', 'Waveform',
    'NaiveOsc', 'PolyBlepOsc',
    'GeneratorRegistry', 'get_registry',
    'InvalidParameterError',
]

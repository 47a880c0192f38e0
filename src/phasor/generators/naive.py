"""
NaiveOsc - Phase accumulator oscillator without anti-aliasing
- Sample is computed from the phase before advancing, so the first
  sample of a fresh oscillator is the value at phase 0
- Sine is alias-free; saw, square and triangle alias at high frequencies
"""

from typing import Dict

from .base import SampleGenerator
from .phase import PhaseAccumulator
from .waveform import Waveform, naive_value
from ..generator_registry import register_generator
from ..param_spec import ParamSpec, CommonParams


@register_generator('naive')
class NaiveOsc(SampleGenerator):
    """
    Naive oscillator: direct waveform computation from phase.

    Params:
    - sample_rate (Hz, float, > 0)
    - frequency (Hz, float): 0 holds the phase, negative runs it backwards
    - waveform (Waveform or name): sine, saw, square, triangle

    Frequencies at or above Nyquist are not guarded and alias.
    """

    def __init__(self, sample_rate: float, frequency: float, waveform=Waveform.SINE):
        self._waveform = Waveform.from_name(waveform)
        self._acc = PhaseAccumulator(sample_rate, frequency)

    @classmethod
    def get_param_specs(cls) -> Dict[str, ParamSpec]:
        return {
            "sample_rate": CommonParams.sample_rate(),
            "frequency": CommonParams.frequency(),
            "waveform": CommonParams.waveform(),
        }

    @property
    def waveform(self) -> Waveform:
        return self._waveform

    @property
    def sample_rate(self) -> float:
        return self._acc.sample_rate

    @property
    def frequency(self) -> float:
        return self._acc.frequency

    @property
    def phase(self) -> float:
        """Phase of the next sample, in [0, 1)"""
        return self._acc.phase

    @property
    def increment(self) -> float:
        return self._acc.increment

    def set_frequency(self, hz: float) -> None:
        """Set frequency in Hz (between pulls only)."""
        self._acc.set_frequency(hz)

    def set_sample_rate(self, hz: float) -> None:
        """Set sample rate in Hz (between pulls only)."""
        self._acc.set_sample_rate(hz)

    def _shape(self, phase: float) -> float:
        return naive_value(self._waveform, phase)

    def next_sample(self) -> float:
        value = self._shape(self._acc.phase)
        self._acc.advance()
        return value

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(sample_rate={self.sample_rate}, "
                f"frequency={self.frequency}, waveform={self._waveform.value})")

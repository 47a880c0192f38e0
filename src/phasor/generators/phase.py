"""
PhaseAccumulator - normalized phase state shared by the oscillators
- Phase lives in [0, 1) and is re-wrapped after every advance
- Negative frequency runs the phase backwards
- Remembers the last applied increment so the band-limited oscillator
  can bracket discontinuities
"""

import math

from ..param_spec import CommonParams, InvalidParameterError

_SAMPLE_RATE_SPEC = CommonParams.sample_rate()
_FREQUENCY_SPEC = CommonParams.frequency()


def _increment(frequency: float, sample_rate: float) -> float:
    """Per-sample phase step; rejected when the ratio overflows."""
    increment = frequency / sample_rate
    if not math.isfinite(increment):
        raise InvalidParameterError(
            f"frequency / sample_rate must be finite, got {frequency} / {sample_rate}"
        )
    return increment


class PhaseAccumulator:
    """
    Phase accumulator with per-sample increment = frequency / sample_rate.

    Frequencies at or above Nyquist are accepted; a step larger than a full
    cycle is folded back with a modulo so phase never escapes [0, 1).
    """

    def __init__(self, sample_rate: float, frequency: float):
        self._sample_rate = _SAMPLE_RATE_SPEC.validate(sample_rate)
        self._frequency = _FREQUENCY_SPEC.validate(frequency)
        self.increment = _increment(self._frequency, self._sample_rate)

        self.phase = 0.0
        # 0.0 until the first advance: nothing has been crossed yet
        self.last_increment = 0.0

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def frequency(self) -> float:
        return self._frequency

    def set_frequency(self, hz: float) -> None:
        """Change frequency; takes effect on the next advance."""
        frequency = _FREQUENCY_SPEC.validate(hz)
        self.increment = _increment(frequency, self._sample_rate)
        self._frequency = frequency

    def set_sample_rate(self, hz: float) -> None:
        """Change sample rate; takes effect on the next advance."""
        sample_rate = _SAMPLE_RATE_SPEC.validate(hz)
        self.increment = _increment(self._frequency, sample_rate)
        self._sample_rate = sample_rate

    def advance(self) -> float:
        """
        Step the phase by one sample and re-wrap into [0, 1).

        Returns:
            The new phase
        """
        inc = self.increment
        phase = self.phase + inc

        # subtraction only when needed, modulo only for steps over a cycle
        if phase >= 1.0:
            phase -= 1.0
            if phase >= 1.0:
                phase %= 1.0
        elif phase < 0.0:
            phase += 1.0
            if phase < 0.0:
                phase %= 1.0

        # tiny negative values round up to exactly 1.0
        if phase >= 1.0:
            phase = 0.0

        self.phase = phase
        self.last_increment = inc
        return phase

    def __repr__(self) -> str:
        return (f"PhaseAccumulator(sample_rate={self._sample_rate}, "
                f"frequency={self._frequency}, phase={self.phase:.6f})")

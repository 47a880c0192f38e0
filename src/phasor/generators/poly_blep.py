"""
PolyBlepOsc - Band-limited oscillator using polynomial corrections
- Saw and square: polyBLEP step residual at each jump
- Triangle: polyBLAMP slope residual at each corner (0.25 and 0.75)
- Sine: passed through unchanged

The correction is applied to the sample just before and just after each
discontinuity. The after side is sized by the increment of the advance
that crossed it, the before side by the upcoming increment, so frequency
changes between pulls are bracketed correctly. With negative frequency the
phase runs backwards and the two sides trade places.
"""

from .naive import NaiveOsc
from .waveform import Waveform
from ..generator_registry import register_generator

# Half a cycle: the Nyquist increment
MAX_KERNEL_WIDTH = 0.5


def poly_blep(t: float, dt: float) -> float:
    """
    Two-sample polynomial residual of a unit step.

    Args:
        t: Phase distance past the discontinuity, wrapped into [0, 1)
        dt: Kernel width in phase units (one sample's increment)

    Returns:
        Correction, non-zero only within dt of the discontinuity
    """
    if dt <= 0.0:
        return 0.0

    # Just after discontinuity: t in [0, dt)
    if t < dt:
        x = t / dt
        return 2.0 * x - x * x - 1.0

    # Just before discontinuity: t in (1 - dt, 1)
    if t > 1.0 - dt:
        x = (t - 1.0) / dt
        return x * x + 2.0 * x + 1.0

    return 0.0


def poly_blamp(t: float, dt: float) -> float:
    """
    Integrated polyBLEP residual, for a unit change of slope per sample.

    Symmetric around the corner, 1/6 at the corner itself.
    """
    if dt <= 0.0:
        return 0.0

    if t < dt:
        x = 1.0 - t / dt
        return x * x * x / 6.0

    if t > 1.0 - dt:
        x = 1.0 + (t - 1.0) / dt
        return x * x * x / 6.0

    return 0.0


def _side_width(t: float, dt_after: float, dt_before: float) -> float:
    """Kernel width for the side of the discontinuity t sits on."""
    return dt_after if t < 0.5 else dt_before


def _bracketed(kernel, t: float, dt_after: float, dt_before: float) -> float:
    return kernel(t, _side_width(t, dt_after, dt_before))


@register_generator('polyblep')
class PolyBlepOsc(NaiveOsc):
    """
    Band-limited oscillator: naive phase model plus polyBLEP/polyBLAMP.

    Same construction parameters and pull interface as NaiveOsc.
    Above Nyquist aliasing is reduced, not eliminated; output stays finite.
    """

    def _shape(self, phase: float) -> float:
        value = super()._shape(phase)
        waveform = self._waveform

        if waveform is Waveform.SINE:
            return value

        # last_increment is 0 before the first advance: no after-side correction.
        # Widths are capped at half a cycle so the two sides never overlap.
        dt_after = min(abs(self._acc.last_increment), MAX_KERNEL_WIDTH)
        dt_before = min(abs(self._acc.increment), MAX_KERNEL_WIDTH)
        if self._acc.increment < 0.0:
            # Running backwards: small t is the side not yet crossed
            dt_after, dt_before = dt_before, dt_after

        if waveform is Waveform.SAW:
            # Falling jump of 2 at phase 0
            return value - _bracketed(poly_blep, phase, dt_after, dt_before)

        if waveform is Waveform.SQUARE:
            # Rising jump at 0, falling jump at 0.5
            value += _bracketed(poly_blep, phase, dt_after, dt_before)
            value -= _bracketed(poly_blep, (phase + 0.5) % 1.0, dt_after, dt_before)
            return value

        # Triangle slope changes by 8 per cycle (8 * dt per sample) at each corner
        t_peak = (phase - 0.25) % 1.0
        t_trough = (phase - 0.75) % 1.0
        value -= 8.0 * _side_width(t_peak, dt_after, dt_before) * \
            _bracketed(poly_blamp, t_peak, dt_after, dt_before)
        value += 8.0 * _side_width(t_trough, dt_after, dt_before) * \
            _bracketed(poly_blamp, t_trough, dt_after, dt_before)
        return value

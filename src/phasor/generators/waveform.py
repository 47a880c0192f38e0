"""
Waveform selector and naive shaping functions
"""

import math
from enum import Enum

from ..param_spec import InvalidParameterError

TWO_PI = 2.0 * math.pi


class Waveform(Enum):
    """Periodic waveform shapes"""
    SINE = "sine"
    SAW = "saw"
    SQUARE = "square"
    TRIANGLE = "triangle"

    @classmethod
    def from_name(cls, name) -> 'Waveform':
        """
        Resolve a waveform from an enum member, its value or its name.

        Raises:
            InvalidParameterError: If the name is not a known waveform
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise InvalidParameterError(
            f"waveform must be one of {[m.value for m in cls]}, got {name!r}"
        )


def naive_value(waveform: Waveform, phase: float) -> float:
    """
    Raw (aliased) waveform value at a phase in [0, 1).

    Triangle peaks at phase 0.25 (+1) and bottoms at 0.75 (-1).
    """
    if waveform is Waveform.SINE:
        return math.sin(TWO_PI * phase)

    if waveform is Waveform.SAW:
        return 2.0 * phase - 1.0

    if waveform is Waveform.SQUARE:
        return 1.0 if phase < 0.5 else -1.0

    # Triangle
    if phase < 0.25:
        return 4.0 * phase
    elif phase < 0.75:
        return 2.0 - 4.0 * phase
    return 4.0 * phase - 4.0

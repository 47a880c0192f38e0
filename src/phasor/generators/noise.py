"""
NoiseGen - White, pink and brown noise sources
Kept apart from the oscillator modules: nothing here imports them, and the
package root does not import this module, so the random source is only
pulled in when noise is actually used.

Coloring is a bank of one-pole stages fed by the white source:
    s_i = pole_i * s_i + gain_i * w
    out = scale * (sum(s_i) + residual * w)
White, pink and brown differ only in the bank configuration.
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .base import SampleGenerator
from .. import config
from ..generator_registry import register_generator
from ..param_spec import ParamSpec, ParamType, CommonParams, InvalidParameterError


@dataclass(frozen=True)
class NoiseColor:
    """Fixed filter-bank configuration for one noise color."""
    name: str
    poles: Tuple[float, ...] = ()
    gains: Tuple[float, ...] = ()
    residual: float = 1.0
    scale: float = 1.0

    def __post_init__(self):
        if len(self.poles) != len(self.gains):
            raise ValueError(f"{self.name}: poles and gains differ in length")
        # Stable for bounded input only if every pole is inside the unit circle
        if any(abs(p) >= 1.0 for p in self.poles):
            raise ValueError(f"{self.name}: unstable pole in {self.poles}")

    @classmethod
    def from_name(cls, name) -> 'NoiseColor':
        """
        Resolve "white", "pink" or "brown" (case-insensitive).

        Raises:
            InvalidParameterError: If the color is unknown
        """
        if isinstance(name, cls):
            return name
        key = name.strip().lower() if isinstance(name, str) else name
        if key not in NOISE_COLORS:
            raise InvalidParameterError(
                f"noise color must be one of {list(NOISE_COLORS)}, got {name!r}"
            )
        return NOISE_COLORS[key]


WHITE = NoiseColor("white")

# Paul Kellet's pink filter coefficients (tuned for 44.1kHz)
PINK = NoiseColor(
    "pink",
    poles=(0.99886, 0.99332, 0.96900, 0.86650, 0.55000, -0.7616),
    gains=(0.0555179, 0.0750759, 0.1538520, 0.3104856, 0.5329522, -0.0168980),
    residual=0.5362,
    scale=0.11,
)

# Leaky integrator; the leak keeps the random walk from drifting away
BROWN = NoiseColor(
    "brown",
    poles=(1.0 / 1.02,),
    gains=(0.02 / 1.02,),
    residual=0.0,
    scale=3.5,
)

NOISE_COLORS: Dict[str, NoiseColor] = {
    "white": WHITE,
    "pink": PINK,
    "brown": BROWN,
}


@register_generator('white', color='white')
@register_generator('pink', color='pink')
@register_generator('brown', color='brown')
class NoiseGen(SampleGenerator):
    """
    Noise source with private filter state.

    Params:
    - color: "white", "pink" or "brown"
    - seed (int or None): None seeds from OS entropy, so separately built
      generators are independent; an int makes the stream reproducible

    Output is not hard-clipped; the color's scale keeps long-run RMS bounded.
    """

    def __init__(self, color="white", seed: Optional[int] = None):
        self._color = NoiseColor.from_name(color)
        self._seed = CommonParams.seed().validate(seed)
        self._rng = np.random.default_rng(self._seed)

        self._poles = list(self._color.poles)
        self._gains = list(self._color.gains)
        self._state = [0.0] * len(self._poles)

        config.log("NoiseGen", f"{self._color.name} noise, seed={self._seed}")

    @classmethod
    def white(cls, seed: Optional[int] = None) -> 'NoiseGen':
        """White noise: flat spectrum, uniform in [-1, 1)."""
        return cls(WHITE, seed)

    @classmethod
    def pink(cls, seed: Optional[int] = None) -> 'NoiseGen':
        """Pink noise: -3dB/octave, equal energy per octave."""
        return cls(PINK, seed)

    @classmethod
    def brown(cls, seed: Optional[int] = None) -> 'NoiseGen':
        """Brown noise: -6dB/octave, leaky-integrated white."""
        return cls(BROWN, seed)

    @classmethod
    def get_param_specs(cls) -> Dict[str, ParamSpec]:
        return {
            "color": ParamSpec(
                name="color",
                param_type=ParamType.ENUM,
                default="white",
                enum_values=list(NOISE_COLORS),
                description="Noise color"
            ),
            "seed": CommonParams.seed(),
        }

    @property
    def color(self) -> NoiseColor:
        return self._color

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_sample(self) -> float:
        white = self._rng.random() * 2.0 - 1.0

        state = self._state
        if not state:
            return white

        total = 0.0
        for i, (pole, gain) in enumerate(zip(self._poles, self._gains)):
            s = pole * state[i] + gain * white
            state[i] = s
            total += s

        return self._color.scale * (total + self._color.residual * white)

    def __repr__(self) -> str:
        return f"NoiseGen(color={self._color.name}, seed={self._seed})"

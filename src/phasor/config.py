"""
Runtime configuration for phasor
Environment-driven defaults, read once at import

Variables:
- PHASOR_SAMPLE_RATE: default sample rate for registry-created generators
- PHASOR_VERBOSE: set to 1 to print diagnostics
- PHASOR_SEED: default seed for noise generators built without one
"""

import os
from typing import Optional


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back on bad input."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return float(raw)
    except ValueError:
        print(f"Warning: ignoring {name}={raw!r} (not a number)")
        return default


def _env_seed(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"Warning: ignoring {name}={raw!r} (not an integer)")
        return None


DEFAULT_SAMPLE_RATE = _env_float('PHASOR_SAMPLE_RATE', 44100.0)
VERBOSE = os.environ.get('PHASOR_VERBOSE', '0') not in ('', '0')
DEFAULT_SEED = _env_seed('PHASOR_SEED')


def log(tag: str, message: str) -> None:
    """Print a tagged diagnostic line when PHASOR_VERBOSE is on."""
    if VERBOSE:
        print(f"[{tag}] {message}")

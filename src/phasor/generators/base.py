"""
SampleGenerator - Pull contract shared by every generator

Key principles:
1. next_sample() advances state by exactly one sample
2. fill(buffer) advances state by exactly len(buffer) samples, in order
3. Generators are unbounded iterators, they never stop on their own
4. No reset: restart by constructing a new generator with the same params
5. Not thread-safe, each instance belongs to one caller
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import Dict, MutableSequence

from ..param_spec import ParamSpec

# Sample type of the buffers this library allocates
BUFFER_DTYPE = np.float32


class SampleGenerator(ABC):
    """
    Base class for all sample sources.

    Subclasses implement next_sample(); buffer fill and iteration are built
    on top of it so every pull path produces the same sequence.
    """

    @classmethod
    @abstractmethod
    def get_param_specs(cls) -> Dict[str, ParamSpec]:
        """
        Define construction parameters for this generator.

        Returns:
            Dictionary mapping parameter names to ParamSpec objects
        """
        pass

    @abstractmethod
    def next_sample(self) -> float:
        """
        Generate and return the next sample.

        Returns:
            Sample value, nominally in [-1.0, 1.0]
        """
        pass

    def fill(self, buffer: MutableSequence[float]) -> MutableSequence[float]:
        """
        Fill a caller-provided buffer with consecutive samples.

        Args:
            buffer: Mutable sequence (normally a float32 numpy array)

        Returns:
            The same buffer, for chaining
        """
        for i in range(len(buffer)):
            buffer[i] = self.next_sample()
        return buffer

    def take(self, count: int) -> np.ndarray:
        """
        Allocate a float32 buffer and fill it with the next samples.

        Args:
            count: Number of samples

        Returns:
            New array of length count
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return self.fill(np.zeros(count, dtype=BUFFER_DTYPE))

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self.next_sample()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

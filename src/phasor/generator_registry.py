"""
Generator Registry - Centralized lookup and construction by name

Provides:
- Central registry for all sample generators
- Lazy import of generator modules (noise is only loaded when asked for)
- Registration validation
- Factory for instance creation with environment defaults
"""

import importlib
from typing import Dict, Type, Optional, List, Any, Tuple

from . import config
from .generators.base import SampleGenerator

# Where each built-in id lives, imported on first use
_BUILTIN_MODULES: Dict[str, str] = {
    'naive': 'phasor.generators.naive',
    'polyblep': 'phasor.generators.poly_blep',
    'white': 'phasor.generators.noise',
    'pink': 'phasor.generators.noise',
    'brown': 'phasor.generators.noise',
}


class GeneratorRegistry:
    """
    Central registry for sample generators.

    Maps a generator id to its class plus preset constructor arguments
    (the noise colors share one class and differ only in preset).
    """

    # Class-level registry (singleton pattern)
    _instance = None
    _generators: Dict[str, Tuple[Type[SampleGenerator], Dict[str, Any]]] = {}

    def __new__(cls):
        """Singleton pattern - only one registry"""
        if cls._instance is None:
            cls._instance = super(GeneratorRegistry, cls).__new__(cls)
        return cls._instance

    @classmethod
    def register(cls, generator_id: str, generator_class: Type[SampleGenerator],
                 **preset: Any) -> None:
        """
        Register a generator class with the registry.

        Args:
            generator_id: Unique identifier for the generator
            generator_class: Class (must inherit from SampleGenerator)
            **preset: Constructor arguments fixed for this id

        Raises:
            ValueError: If generator_id already registered or class invalid
        """
        if generator_id in cls._generators:
            raise ValueError(f"Generator '{generator_id}' already registered")

        if not (isinstance(generator_class, type) and
                issubclass(generator_class, SampleGenerator)):
            raise ValueError(f"Generator must inherit from SampleGenerator")

        specs = generator_class.get_param_specs()
        unknown = [name for name in preset if name not in specs]
        if unknown:
            raise ValueError(
                f"Generator '{generator_id}' preset has unknown params: {unknown}"
            )

        cls._generators[generator_id] = (generator_class, dict(preset))
        config.log("Registry", f"Registered generator: {generator_id}")

    @classmethod
    def lazy_load(cls, generator_id: str) -> Optional[Type[SampleGenerator]]:
        """
        Return the class for an id, importing its built-in module if needed.

        Args:
            generator_id: Generator identifier

        Returns:
            Generator class or None if not found
        """
        if generator_id not in cls._generators:
            module_name = _BUILTIN_MODULES.get(generator_id)
            if module_name is None:
                return None
            config.log("Registry", f"Loading {module_name} for '{generator_id}'")
            importlib.import_module(module_name)

        entry = cls._generators.get(generator_id)
        return entry[0] if entry else None

    @classmethod
    def create_instance(cls, generator_id: str, **params: Any) -> SampleGenerator:
        """
        Create an instance of a registered generator.

        Missing sample_rate and seed fall back to PHASOR_SAMPLE_RATE and
        PHASOR_SEED; other missing params use their spec defaults.

        Args:
            generator_id: Generator identifier
            **params: Constructor arguments

        Returns:
            Generator instance

        Raises:
            KeyError: If the id is unknown
        """
        generator_class = cls.lazy_load(generator_id)
        if generator_class is None:
            raise KeyError(f"Generator '{generator_id}' not found")

        _, preset = cls._generators[generator_id]
        specs = generator_class.get_param_specs()

        kwargs: Dict[str, Any] = {}
        for name, spec in specs.items():
            if name in preset:
                kwargs[name] = preset[name]
            elif name in params:
                kwargs[name] = params[name]
            elif name == 'sample_rate':
                kwargs[name] = config.DEFAULT_SAMPLE_RATE
            elif name == 'seed':
                kwargs[name] = config.DEFAULT_SEED
            else:
                kwargs[name] = spec.default

        extra = [name for name in params if name not in specs or name in preset]
        if extra:
            raise TypeError(f"Generator '{generator_id}' got unexpected params: {extra}")

        return generator_class(**kwargs)

    @classmethod
    def list_registered(cls) -> List[str]:
        """
        List all registered generator ids.

        Returns:
            List of generator ids
        """
        return list(cls._generators.keys())

    @classmethod
    def list_available(cls) -> List[str]:
        """
        List all available generator ids (registered + built-in, not yet loaded).

        Returns:
            Sorted list of generator ids
        """
        return sorted(set(cls._generators) | set(_BUILTIN_MODULES))

    @classmethod
    def get_generator_info(cls, generator_id: str) -> Optional[dict]:
        """
        Get information about a generator.

        Args:
            generator_id: Generator identifier

        Returns:
            Dictionary with generator information or None
        """
        generator_class = cls.lazy_load(generator_id)
        if generator_class is None:
            return None

        _, preset = cls._generators[generator_id]
        return {
            "generator_id": generator_id,
            "class_name": generator_class.__name__,
            "docstring": generator_class.__doc__,
            "preset": dict(preset),
            "parameters": {
                name: spec.to_dict()
                for name, spec in generator_class.get_param_specs().items()
                if name not in preset
            }
        }

    @classmethod
    def clear(cls):
        """Clear the registry (mainly for testing)"""
        cls._generators.clear()


# Generator registration decorator
def register_generator(generator_id: str, **preset: Any):
    """
    Decorator for registering generators with the central registry.

    Usage:
        @register_generator("naive")
        class NaiveOsc(SampleGenerator):
            ...

    Args:
        generator_id: Unique identifier for the generator
        **preset: Constructor arguments fixed for this id
    """
    def decorator(cls):
        GeneratorRegistry.register(generator_id, cls, **preset)
        return cls

    return decorator


# Convenience function for getting the singleton
def get_registry() -> GeneratorRegistry:
    """Get the global generator registry instance"""
    return GeneratorRegistry()

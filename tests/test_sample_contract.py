#!/usr/bin/env python3
"""
Test suite for the sample-sequence contract
Verifies fill/next_sample equivalence, iteration and module isolation
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import subprocess
from itertools import islice

import numpy as np
import pytest

from phasor import SampleGenerator, BUFFER_DTYPE
from phasor.generators.naive import NaiveOsc
from phasor.generators.noise import NoiseGen
from phasor.generators.poly_blep import PolyBlepOsc
from phasor.generators.waveform import Waveform

SRC_DIR = os.path.join(os.path.dirname(__file__), '..', 'src')


def make_generators():
    """Factories producing identical fresh generators on each call"""
    factories = []
    for osc_class in (NaiveOsc, PolyBlepOsc):
        for waveform in Waveform:
            factories.append(
                (f"{osc_class.__name__}-{waveform.value}",
                 lambda c=osc_class, w=waveform: c(44100.0, 1234.5, w))
            )
    for color in ("white", "pink", "brown"):
        factories.append(
            (f"noise-{color}", lambda c=color: NoiseGen(c, seed=1234))
        )
    return factories


FACTORIES = make_generators()


@pytest.mark.parametrize("name,factory", FACTORIES, ids=[n for n, _ in FACTORIES])
def test_fill_matches_next_sample(name, factory):
    """fill(N) writes exactly what N next_sample() calls would return"""
    filled = np.zeros(1000, dtype=BUFFER_DTYPE)
    factory().fill(filled)

    gen = factory()
    pulled = np.array([gen.next_sample() for _ in range(1000)], dtype=BUFFER_DTYPE)

    assert np.array_equal(filled, pulled)


@pytest.mark.parametrize("name,factory", FACTORIES, ids=[n for n, _ in FACTORIES])
def test_consecutive_fills_continue_the_stream(name, factory):
    """Two fills of 300 equal one fill of 600"""
    whole = factory().take(600)

    gen = factory()
    first = gen.take(300)
    second = gen.take(300)

    assert np.array_equal(whole, np.concatenate([first, second]))


def test_fill_returns_buffer_and_writes_every_slot():
    osc = NaiveOsc(4.0, 1.0, Waveform.SAW)
    buffer = np.full(7, np.nan, dtype=np.float32)

    result = osc.fill(buffer)

    assert result is buffer
    assert not np.any(np.isnan(buffer))


def test_fill_accepts_plain_list():
    osc = NaiveOsc(4.0, 1.0, Waveform.SQUARE)
    buffer = [0.0] * 5

    osc.fill(buffer)

    assert buffer == [1.0, 1.0, -1.0, -1.0, 1.0]


def test_fill_advances_phase_by_buffer_length():
    osc = NaiveOsc(100.0, 10.0, Waveform.SINE)
    osc.fill(np.zeros(3, dtype=np.float32))

    assert osc.phase == pytest.approx(0.3)


def test_empty_fill_is_a_no_op():
    osc = NaiveOsc(100.0, 10.0, Waveform.SINE)
    osc.fill(np.zeros(0, dtype=np.float32))

    assert osc.phase == 0.0
    assert len(osc.take(0)) == 0


def test_take_rejects_negative_count():
    with pytest.raises(ValueError):
        NaiveOsc(100.0, 10.0, Waveform.SINE).take(-1)


def test_take_dtype():
    samples = PolyBlepOsc(44100.0, 440.0, Waveform.SAW).take(16)
    assert samples.dtype == np.float32


def test_iterator_is_lazy_and_unbounded():
    osc = NaiveOsc(4.0, 1.0, Waveform.SINE)

    assert iter(osc) is osc
    first = list(islice(osc, 4))
    assert first == pytest.approx([0.0, 1.0, 0.0, -1.0], abs=1e-9)

    # Keeps going where it left off, never exhausted
    assert next(osc) == pytest.approx(0.0, abs=1e-9)
    assert len(list(islice(osc, 10000))) == 10000


def test_noise_iterates():
    noise = NoiseGen.white(seed=9)
    samples = list(islice(noise, 100))
    assert len(samples) == 100
    assert all(-1.0 <= s < 1.0 for s in samples)


def test_all_generators_share_the_contract():
    for _, factory in FACTORIES:
        assert isinstance(factory(), SampleGenerator)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        SampleGenerator()


def test_noise_not_imported_by_package_root():
    """Oscillators work without loading the noise module"""
    code = (
        "import sys, phasor\n"
        "osc = phasor.NaiveOsc(44100.0, 440.0, 'saw')\n"
        "osc.take(64)\n"
        "print('phasor.generators.noise' in sys.modules)\n"
        "phasor.get_registry().create_instance('white', seed=1)\n"
        "print('phasor.generators.noise' in sys.modules)\n"
    )
    env = dict(os.environ)
    env['PHASOR_VERBOSE'] = '0'
    env['PYTHONPATH'] = os.pathsep.join(
        [os.path.abspath(SRC_DIR)] + ([env['PYTHONPATH']] if env.get('PYTHONPATH') else [])
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True, text=True, env=env, timeout=60
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == ["False", "True"]

"""Unit tests for the generator pool and circle test."""

import numpy as np
import pytest

from pibench.sampling import generator_pool, is_inside, sample_points


def test_classifier_points():
    assert is_inside(0.0, 0.0) is True
    assert is_inside(0.6, 0.6) is True
    assert is_inside(1.0, 1.0) is False
    assert is_inside(1.0, 0.0) is True


def test_classifier_arrays():
    xs = np.array([0.0, 0.6, 1.0, 1.0])
    ys = np.array([0.0, 0.6, 1.0, 0.0])
    np.testing.assert_array_equal(is_inside(xs, ys), [True, True, False, True])


def test_pool_generators_are_distinct():
    pool = generator_pool(4, seed=7)
    assert len(pool) == 4
    assert len({id(rng) for rng in pool}) == 4
    first = [rng.random() for rng in pool]
    assert len(set(first)) == 4


def test_pool_is_reproducible_with_seed():
    a = [rng.random(3) for rng in generator_pool(3, seed=42)]
    b = [rng.random(3) for rng in generator_pool(3, seed=42)]
    for left, right in zip(a, b):
        np.testing.assert_array_equal(left, right)


def test_samples_in_unit_square():
    (rng,) = generator_pool(1, seed=1)
    xs, ys = sample_points(rng, 10_000)
    assert xs.shape == ys.shape == (10_000,)
    assert xs.min() >= 0.0 and xs.max() < 1.0
    assert ys.min() >= 0.0 and ys.max() < 1.0


def test_pool_rejects_negative_size():
    with pytest.raises(ValueError):
        generator_pool(-1)


def test_pool_keys_separate_streams():
    default = generator_pool(2, seed=7)[0].random(3)
    keyed_two = generator_pool(2, seed=7, key=(2,))[0].random(3)
    keyed_many = generator_pool(64, seed=7, key=(64,))[0].random(3)
    assert not np.array_equal(default, keyed_two)
    assert not np.array_equal(keyed_two, keyed_many)


def test_pool_same_key_is_reproducible():
    a = generator_pool(4, seed=7, key=(4,))[3].random(3)
    b = generator_pool(4, seed=7, key=(4,))[3].random(3)
    np.testing.assert_array_equal(a, b)

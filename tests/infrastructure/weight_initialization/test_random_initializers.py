import unittest

import numpy as np

from src.keyinit.domain._distribution import NormalDistribution, UniformDistribution
from src.keyinit.infrastructure.backend import (
    NumpyBackend,
    get_default_backend,
    seed,
    set_default_backend,
)
from src.keyinit.infrastructure.utils.weight_initializer import Normal, Uniform


class RecordingBackend:
    def __init__(self):
        self.calls = []

    def fill(self, shape, value):
        raise AssertionError("random initializers must not fill with constants")

    def random(self, shape, distribution):
        self.calls.append((shape, distribution))
        return np.zeros(shape, dtype=np.float32)

    def seed(self, seed):
        pass


class TestUniformInitializer(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = NumpyBackend(seed=0)

    def test_within_range(self):
        lo, hi = 0.0, 1.0
        t = Uniform(lo, hi).init((2, 2, 2, 2), backend=self.backend)
        self.assertEqual(t.shape, (2, 2, 2, 2))
        self.assertGreaterEqual(float(t.min()), lo)
        self.assertLessEqual(float(t.max()), hi)

    def test_empirical_mean(self):
        lo, hi = -3.0, 5.0
        t = Uniform(lo, hi).init((10000,), backend=self.backend)
        self.assertGreaterEqual(float(t.min()), lo)
        self.assertLessEqual(float(t.max()), hi)
        self.assertAlmostEqual(float(t.mean()), (lo + hi) / 2.0, delta=0.1)

    def test_requests_uniform_distribution(self):
        backend = RecordingBackend()
        Uniform(min=-0.5, max=0.25).init((3, 4), backend=backend)
        self.assertEqual(backend.calls, [((3, 4), UniformDistribution(-0.5, 0.25))])


class TestNormalInitializer(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = NumpyBackend(seed=0)

    def test_mean_and_variance(self):
        mean, std = 0.0, 1.0
        t = Normal(mean, std).init((10000,), backend=self.backend)
        self.assertAlmostEqual(float(t.mean()), mean, delta=0.1)
        self.assertAlmostEqual(float(t.var()), std**2, delta=0.1)

    def test_shifted_mean(self):
        t = Normal(mean=10.0, std=0.5).init((100, 100), backend=self.backend)
        self.assertAlmostEqual(float(t.mean()), 10.0, delta=0.1)
        self.assertAlmostEqual(float(t.var()), 0.25, delta=0.1)

    def test_requests_normal_distribution(self):
        backend = RecordingBackend()
        Normal(1.0, 2.0).init([5], backend=backend)
        self.assertEqual(backend.calls, [((5,), NormalDistribution(1.0, 2.0))])

    def test_negative_std_propagates_backend_error(self):
        with self.assertRaises(ValueError):
            Normal(0.0, -1.0).init((2,), backend=self.backend)


class TestDeterminism(unittest.TestCase):
    def tearDown(self) -> None:
        set_default_backend(None)

    def test_same_seed_same_call_sequence_is_bit_identical(self):
        def run():
            seed(2024)
            return [
                Uniform(-1.0, 1.0).init((4, 4)),
                Normal(0.0, 1.0).init((4, 4)),
            ]

        first = run()
        second = run()
        for a, b in zip(first, second):
            np.testing.assert_array_equal(a, b)

    def test_uses_default_backend_when_not_given(self):
        backend = RecordingBackend()
        set_default_backend(backend)
        Uniform().init((2,))
        self.assertIs(get_default_backend(), backend)
        self.assertEqual(backend.calls, [((2,), UniformDistribution(0.0, 1.0))])

    def test_independent_calls_advance_the_generator(self):
        backend = NumpyBackend(seed=3)
        init = Normal()
        a = init.init((8,), backend=backend)
        b = init.init((8,), backend=backend)
        self.assertFalse(np.array_equal(a, b))


if __name__ == "__main__":
    unittest.main()

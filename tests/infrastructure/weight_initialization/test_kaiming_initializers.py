import math
import unittest

import numpy as np

from src.keyinit.domain._distribution import NormalDistribution, UniformDistribution
from src.keyinit.domain._errors import InvalidFanError, MissingFanError
from src.keyinit.infrastructure.backend import NumpyBackend
from src.keyinit.infrastructure.utils.weight_initializer import (
    KaimingNormal,
    KaimingUniform,
)

# float32 rounding of a value just below the bound can land a hair above it.
_F32_SLACK = 1e-6


class RecordingBackend:
    """Minimal backend stub capturing the requested distribution."""

    def __init__(self):
        self.calls = []

    def fill(self, shape, value):
        raise AssertionError("Kaiming initializers must draw random values")

    def random(self, shape, distribution):
        self.calls.append((shape, distribution))
        return np.zeros(shape, dtype=np.float32)

    def seed(self, seed):
        pass


class TestKaimingInitializers(unittest.TestCase):
    def setUp(self) -> None:
        self.backend = NumpyBackend(seed=0)

    def _assert_within(self, t: np.ndarray, bound: float) -> None:
        self.assertGreaterEqual(float(t.min()), -bound - _F32_SLACK)
        self.assertLessEqual(float(t.max()), bound + _F32_SLACK)

    def test_kaiming_uniform_bound(self):
        gain = 2.0
        fan_in, fan_out = 5, 6
        k = gain * math.sqrt(3.0 / fan_in)

        t = KaimingUniform(gain=gain, fan_out_only=False).init_with(
            (fan_out, fan_in), fan_in, None, backend=self.backend
        )
        self.assertEqual(t.shape, (fan_out, fan_in))
        self._assert_within(t, k)

    def test_kaiming_uniform_bias_shape(self):
        gain = 2.0
        fan_in = 5
        k = gain * math.sqrt(3.0 / fan_in)

        t = KaimingUniform(gain=gain).init_with((3,), fan_in=fan_in, backend=self.backend)
        self.assertEqual(t.shape, (3,))
        self._assert_within(t, k)

    def test_kaiming_uniform_fan_out_only(self):
        gain = 2.0
        fan_in, fan_out = 5, 6
        k = gain * math.sqrt(3.0 / fan_out)

        t = KaimingUniform(gain=gain, fan_out_only=True).init_with(
            (fan_out, fan_in), None, fan_out, backend=self.backend
        )
        self._assert_within(t, k)

    def test_kaiming_uniform_requests_exact_bound(self):
        backend = RecordingBackend()
        KaimingUniform(gain=2.0).init_with((6, 5), fan_in=5, fan_out=6, backend=backend)

        (shape, dist), = backend.calls
        a = math.sqrt(3.0) * 2.0 * (1.0 / math.sqrt(5.0))
        self.assertEqual(shape, (6, 5))
        self.assertIsInstance(dist, UniformDistribution)
        self.assertAlmostEqual(dist.low, -a, places=12)
        self.assertAlmostEqual(dist.high, a, places=12)

    def test_kaiming_normal_variance(self):
        gain = 2.0
        fan_in, fan_out = 1000, 10
        expected_var = (gain * math.sqrt(1.0 / fan_in)) ** 2

        t = KaimingNormal(gain=gain, fan_out_only=False).init_with(
            (fan_out, fan_in), fan_in, None, backend=self.backend
        )
        self.assertAlmostEqual(float(t.mean()), 0.0, delta=0.1)
        self.assertTrue(
            math.isclose(float(t.var()), expected_var, rel_tol=0.1),
            msg=f"var={float(t.var())} not close to expected_var={expected_var}",
        )

    def test_kaiming_normal_per_row_statistics(self):
        gain = 2.0
        fan_in, fan_out = 1000, 10
        expected_var = (gain * math.sqrt(1.0 / fan_in)) ** 2

        t = KaimingNormal(gain=gain).init_with(
            (fan_out, fan_in), fan_in, None, backend=self.backend
        )
        for row_var, row_mean in zip(t.var(axis=1), t.mean(axis=1)):
            self.assertLessEqual(abs(expected_var - float(row_var)), 0.1)
            self.assertLessEqual(abs(float(row_mean)), 0.1)

    def test_kaiming_normal_requests_scaled_std(self):
        backend = RecordingBackend()
        KaimingNormal(gain=3.0, fan_out_only=True).init_with(
            (4, 9), fan_in=None, fan_out=4, backend=backend
        )
        (_, dist), = backend.calls
        self.assertEqual(dist, NormalDistribution(0.0, 3.0 * 0.5))

    def test_init_without_fan_raises(self):
        with self.assertRaises(MissingFanError) as ctx:
            KaimingUniform(gain=2.0, fan_out_only=False).init((6, 5), backend=self.backend)
        self.assertEqual(ctx.exception.fan, "fan_in")
        self.assertIn("init_with", str(ctx.exception))

    def test_kaiming_normal_init_without_fan_raises(self):
        with self.assertRaises(MissingFanError):
            KaimingNormal().init((6, 5), backend=self.backend)

    def test_fan_out_only_without_fan_out_raises(self):
        with self.assertRaises(MissingFanError) as ctx:
            KaimingUniform(fan_out_only=True).init_with(
                (6, 5), fan_in=5, fan_out=None, backend=self.backend
            )
        self.assertEqual(ctx.exception.fan, "fan_out")

    def test_zero_fan_rejected_before_drawing(self):
        backend = RecordingBackend()
        with self.assertRaises(InvalidFanError):
            KaimingUniform().init_with((2, 2), fan_in=0, backend=backend)
        self.assertEqual(backend.calls, [])

    def test_same_value_serves_different_shapes(self):
        init = KaimingUniform(gain=1.0)
        small = init.init_with((2, 4), fan_in=4, backend=self.backend)
        large = init.init_with((16, 64), fan_in=64, backend=self.backend)
        self._assert_within(small, math.sqrt(3.0 / 4.0))
        self._assert_within(large, math.sqrt(3.0 / 64.0))


if __name__ == "__main__":
    unittest.main()

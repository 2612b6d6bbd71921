"""test_filters.py

Fixed-point helpers, dynamic smoother and backlash stage in isolation.
"""

import unittest

from filters import FRAC_BITS, ONE, Backlash, DynamicSmoother, div_trunc, to_fixed


def _smoother(rate_hz=50):
    return DynamicSmoother(to_fixed(0.1), rate_hz << FRAC_BITS, to_fixed(0.02))


class TestFixedPoint(unittest.TestCase):
    def test_to_fixed_truncates(self):
        self.assertEqual(to_fixed(1.0), ONE)
        self.assertEqual(to_fixed(0.1), 6553)
        self.assertEqual(to_fixed(0.02), 1310)
        self.assertEqual(to_fixed(-0.1), -6553)

    def test_div_trunc_rounds_toward_zero(self):
        self.assertEqual(div_trunc(7, 2), 3)
        self.assertEqual(div_trunc(-7, 2), -3)
        self.assertEqual(div_trunc(7, -2), -3)
        self.assertEqual(div_trunc(-7, -2), 3)
        self.assertEqual(div_trunc(0, 5), 0)
        # floor division would give -1 here
        self.assertEqual(div_trunc(-1, 4089), 0)

    def test_div_trunc_by_zero_raises(self):
        with self.assertRaises(ZeroDivisionError):
            div_trunc(1, 0)


class TestDynamicSmoother(unittest.TestCase):
    def test_floor_coefficient_positive_and_rate_dependent(self):
        slow = _smoother(50)
        fast = _smoother(1000)
        self.assertGreater(slow.floor_coefficient(), 0)
        self.assertGreater(fast.floor_coefficient(), 0)
        self.assertLess(fast.floor_coefficient(), slow.floor_coefficient())
        self.assertLess(slow.floor_coefficient(), ONE)

    def test_starts_at_floor(self):
        s = _smoother()
        self.assertEqual(s.current_coefficient(), s.floor_coefficient())
        self.assertEqual(s.value, 0)

    def test_converges_on_constant_input(self):
        s = _smoother()
        out = 0
        for _ in range(400):
            out = s.tick(1000)
        self.assertLessEqual(abs(out - 1000), 1)
        self.assertEqual(out, s.value)

    def test_coefficient_opens_on_step(self):
        s = _smoother()
        for _ in range(400):
            s.tick(1000)
        self.assertLess(s.current_coefficient(), ONE // 4)

        s.tick(3000)
        out = s.tick(3000)
        self.assertEqual(s.current_coefficient(), ONE)
        self.assertEqual(out, 3000)

    def test_coefficient_never_exceeds_one(self):
        s = _smoother()
        for raw in [0, 4095, 0, 4095, 100000, -100000, 0]:
            s.tick(raw)
            self.assertLessEqual(s.current_coefficient(), ONE)
            self.assertGreaterEqual(s.current_coefficient(), s.floor_coefficient())


class TestBacklash(unittest.TestCase):
    def test_holds_inside_window(self):
        b = Backlash(8)
        self.assertEqual(b.update(10), 6)
        self.assertEqual(b.update(8), 6)
        self.assertEqual(b.update(2), 6)
        self.assertEqual(b.update(10), 6)

    def test_follows_outside_window(self):
        b = Backlash(8)
        b.update(10)
        self.assertEqual(b.update(11), 7)
        self.assertEqual(b.update(1), 5)
        self.assertEqual(b.value, 5)

    def test_zero_or_one_width_passes_through(self):
        for width in (0, 1):
            b = Backlash(width)
            self.assertEqual(b.width, width)
            for raw in [5, 4, 4, 100, -3]:
                self.assertEqual(b.update(raw), raw)


if __name__ == "__main__":
    unittest.main()

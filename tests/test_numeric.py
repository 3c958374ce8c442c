from __future__ import annotations

import math
import unittest

import numpy as np

from luvatrix_scales.numeric import KINDS, kind_for, resolve_kind, round_half_away


class NumericKindTests(unittest.TestCase):
    def test_safe_bounds_for_64_bit_integers_stay_inside_float_precision(self) -> None:
        self.assertEqual(KINDS["int64"].safe_min, -9_007_199_254_740_991)
        self.assertEqual(KINDS["int64"].safe_max, 9_007_199_254_740_990)
        self.assertEqual(KINDS["uint64"].safe_min, 0)
        self.assertEqual(KINDS["uint64"].safe_max, 9_007_199_254_740_990)

    def test_narrow_integer_bounds_reserve_top_value(self) -> None:
        self.assertEqual((KINDS["int16"].safe_min, KINDS["int16"].safe_max), (-32768, 32766))
        self.assertEqual((KINDS["uint16"].safe_min, KINDS["uint16"].safe_max), (0, 65534))
        self.assertEqual(KINDS["int32"].safe_max, 2**31 - 2)
        self.assertEqual(KINDS["uint32"].safe_max, 2**32 - 2)

    def test_float_bounds_are_dtype_finite_range(self) -> None:
        self.assertEqual(KINDS["float64"].safe_max, float(np.finfo(np.float64).max))
        self.assertEqual(KINDS["float32"].safe_min, float(np.finfo(np.float32).min))
        self.assertEqual(KINDS["float32"].zero, 0.0)
        self.assertEqual(KINDS["int32"].zero, 0)

    def test_contains_checks_safe_bounds(self) -> None:
        self.assertTrue(KINDS["uint16"].contains(65534))
        self.assertFalse(KINDS["uint16"].contains(65535))
        self.assertFalse(KINDS["uint16"].contains(-1))
        self.assertFalse(KINDS["float64"].contains(math.inf))

    def test_round_half_away_from_zero(self) -> None:
        self.assertEqual(round_half_away(0.5), 1)
        self.assertEqual(round_half_away(-0.5), -1)
        self.assertEqual(round_half_away(4.5), 5)
        self.assertEqual(round_half_away(1.49), 1)
        self.assertEqual(round_half_away(-2.51), -3)

    def test_integer_from_float_rounds_and_saturates(self) -> None:
        int16 = KINDS["int16"]
        self.assertEqual(int16.from_float(2.5), 3)
        self.assertEqual(int16.from_float(-2.5), -3)
        self.assertEqual(int16.from_float(1e20), 32767)
        self.assertEqual(int16.from_float(-1e20), -32768)
        self.assertEqual(int16.from_float(math.inf), 32767)
        self.assertEqual(KINDS["uint16"].from_float(-4.0), 0)

    def test_integer_from_float_rejects_nan(self) -> None:
        with self.assertRaises(ValueError):
            KINDS["int16"].from_float(math.nan)
        with self.assertRaises(ValueError):
            KINDS["uint64"].from_float(math.nan)

    def test_float32_from_float_drops_to_single_precision(self) -> None:
        value = KINDS["float32"].from_float(0.1)
        self.assertEqual(value, float(np.float32(0.1)))
        self.assertNotEqual(value, 0.1)
        self.assertEqual(KINDS["float64"].from_float(0.1), 0.1)

    def test_to_float_is_plain_float(self) -> None:
        self.assertIsInstance(KINDS["int64"].to_float(3), float)
        self.assertEqual(KINDS["uint16"].to_float(np.uint16(9)), 9.0)

    def test_resolve_kind_accepts_names_dtypes_and_types(self) -> None:
        self.assertIs(resolve_kind("uint16"), KINDS["uint16"])
        self.assertIs(resolve_kind(" Float32 "), KINDS["float32"])
        self.assertIs(resolve_kind(np.int32), KINDS["int32"])
        self.assertIs(resolve_kind(np.dtype("uint64")), KINDS["uint64"])
        self.assertIs(resolve_kind(float), KINDS["float64"])
        self.assertIs(resolve_kind(KINDS["int16"]), KINDS["int16"])

    def test_resolve_kind_rejects_unsupported(self) -> None:
        with self.assertRaises(ValueError):
            resolve_kind("int8")
        with self.assertRaises(ValueError):
            resolve_kind(object())

    def test_kind_for_prefers_numpy_scalar_type(self) -> None:
        self.assertEqual(kind_for(0, np.uint16(360)).name, "uint16")
        self.assertEqual(kind_for(np.float32(-1.0), 1.0).name, "float32")

    def test_kind_for_plain_numbers(self) -> None:
        self.assertEqual(kind_for(-180, 180).name, "int64")
        self.assertEqual(kind_for(0, 2.0).name, "float64")
        with self.assertRaises(ValueError):
            kind_for("a", "b")


if __name__ == "__main__":
    unittest.main()

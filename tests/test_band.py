from __future__ import annotations

import unittest

from luvatrix_scales import Band, DimensionTooSmall


class BandTests(unittest.TestCase):
    def test_three_categories_over_300(self) -> None:
        band = Band.new(["Apples", "Pears", "Bananas"], 300)
        self.assertEqual(
            list(band.iter()),
            [
                ("Apples", (5, 94)),
                ("Pears", (105, 194)),
                ("Bananas", (205, 294)),
            ],
        )
        self.assertEqual(band.step(), 100.0)
        self.assertEqual(band.bandwidth(), 90)

    def test_bands_ascend_without_overlap(self) -> None:
        band = Band.new(range(1977, 2018), 600).padding_inner(0.1)
        self.assertEqual(band.dimension, 600)
        bands = list(band)
        self.assertEqual([value for value, _ in bands], list(range(1977, 2018)))
        previous_end = -1
        for _, (start, end) in bands:
            self.assertGreater(start, previous_end)
            self.assertEqual(end - start + 1, band.bandwidth())
            self.assertLess(end, band.dimension)
            previous_end = end

    def test_dimension_is_enlarged_to_fit_domain(self) -> None:
        band = Band.new(range(100), 300)
        self.assertEqual(band.dimension, 990)
        self.assertGreaterEqual(band.bandwidth(), 1)

    def test_empty_domain_keeps_dimension(self) -> None:
        band = Band.new([], 100)
        self.assertEqual(band.dimension, 100)
        self.assertEqual(list(band), [])
        self.assertEqual(len(band), 0)

    def test_single_value_band(self) -> None:
        self.assertEqual(list(Band.new(["x"], 10)), [("x", (0, 8))])

    def test_builder_returns_updated_copies(self) -> None:
        base = Band.new(["a", "b", "c"], 300)
        tuned = base.padding_inner(0.2).padding_outer(0.1).align(0.0)
        self.assertIsNot(base, tuned)
        self.assertEqual((base.inner, base.outer, base.alignment), (0.1, 0.05, 0.5))
        self.assertEqual((tuned.inner, tuned.outer, tuned.alignment), (0.2, 0.1, 0.0))

    def test_out_of_range_fractions_fall_back_to_defaults(self) -> None:
        band = Band.new(["a", "b"], 100)
        self.assertEqual(band.padding_inner(1.5).inner, 0.1)
        self.assertEqual(band.padding_outer(-0.2).outer, 0.05)
        self.assertEqual(band.align(1.0).alignment, 0.5)

    def test_zero_align_starts_at_origin(self) -> None:
        band = Band.new(["a", "b", "c"], 300).align(0.0)
        first = next(iter(band))
        self.assertEqual(first, ("a", (0, 89)))

    def test_band_lookup(self) -> None:
        band = Band.new(["Apples", "Pears", "Bananas"], 300)
        self.assertEqual(band.band("Pears"), (105, 194))
        self.assertIsNone(band.band("Kiwi"))

    def test_zero_dimension_is_rejected(self) -> None:
        with self.assertRaises(DimensionTooSmall):
            Band.new(["a"], 0)


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

import itertools
import unittest

from datefilter.classify import fully_contained, inclusive_overlap

# Small integer domain with every ordering between item and range endpoints.
_POINTS = range(0, 7)


def _spans():
    for s, e in itertools.product(_POINTS, repeat=2):
        if s <= e:
            yield s, e


class TestClassifyPropertiesContract(unittest.TestCase):
    def test_inclusive_overlap_is_negation_of_disjoint(self) -> None:
        for (s, e), (rs, re_) in itertools.product(list(_spans()), repeat=2):
            with self.subTest(item=(s, e), rng=(rs, re_)):
                self.assertEqual(inclusive_overlap(s, e, rs, re_), not (e < rs or s > re_))

    def test_containment_implies_overlap(self) -> None:
        for (s, e), (rs, re_) in itertools.product(list(_spans()), repeat=2):
            if fully_contained(s, e, rs, re_):
                with self.subTest(item=(s, e), rng=(rs, re_)):
                    self.assertTrue(inclusive_overlap(s, e, rs, re_))

    def test_half_open_ranges_match_far_bound_limit(self) -> None:
        # An open side behaves like a bound pushed past every item.
        far = 10_000
        for (s, e) in _spans():
            for b in _POINTS:
                with self.subTest(item=(s, e), bound=b):
                    self.assertEqual(inclusive_overlap(s, e, b, None), inclusive_overlap(s, e, b, far))
                    self.assertEqual(inclusive_overlap(s, e, None, b), inclusive_overlap(s, e, -far, b))
                    self.assertEqual(fully_contained(s, e, b, None), fully_contained(s, e, b, far))
                    self.assertEqual(fully_contained(s, e, None, b), fully_contained(s, e, -far, b))


if __name__ == "__main__":
    unittest.main(verbosity=2)

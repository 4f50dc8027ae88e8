import unittest
from math import comb

from sharevote.combinatorics import combinations, count_combinations


class CombinationGeneratorTest(unittest.TestCase):
    def test_choose_two_of_four(self):
        self.assertEqual(
            list(combinations([1, 2, 3, 4], 2)),
            [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)],
        )

    def test_item_order_is_preserved(self):
        self.assertEqual(
            list(combinations("cab", 2)),
            [("c", "a"), ("c", "b"), ("a", "b")],
        )

    def test_out_of_range_k_yields_nothing(self):
        self.assertEqual(list(combinations([1, 2, 3], 0)), [])
        self.assertEqual(list(combinations([1, 2, 3], -1)), [])
        self.assertEqual(list(combinations([1, 2, 3], 4)), [])
        self.assertEqual(list(combinations([], 1)), [])

    def test_full_subset(self):
        self.assertEqual(list(combinations([1, 2, 3], 3)), [(1, 2, 3)])

    def test_each_subset_exactly_once(self):
        for n in range(1, 8):
            for k in range(1, n + 1):
                subsets = list(combinations(range(n), k))
                self.assertEqual(len(subsets), comb(n, k))
                self.assertEqual(len(set(subsets)), len(subsets))
                self.assertEqual(subsets, sorted(subsets))

    def test_restartable(self):
        items = [1, 2, 3]
        first = combinations(items, 2)
        next(first)
        second = combinations(items, 2)
        self.assertEqual(list(second), [(1, 2), (1, 3), (2, 3)])
        self.assertEqual(list(first), [(1, 3), (2, 3)])

    def test_lazy_over_large_pool(self):
        subsets = combinations(range(10**6), 3)
        self.assertEqual(next(subsets), (0, 1, 2))
        self.assertEqual(next(subsets), (0, 1, 3))

    def test_count_combinations(self):
        self.assertEqual(count_combinations(4, 3), 4)
        self.assertEqual(count_combinations(10, 7), 120)
        self.assertEqual(count_combinations(3, 0), 0)
        self.assertEqual(count_combinations(3, 4), 0)


if __name__ == '__main__':
    unittest.main()

import bisect
import random
import unittest
from operator import itemgetter

import shuffledsearch
from shuffledsearch import NOT_FOUND
from shuffledsearch.test import layout, unique_sorted, RecordingList

class SearchTest(unittest.TestCase):
    def test_literal(self):
        a = [2, 1, 0, 4, 3]
        self.assertEqual(shuffledsearch.search(4, a, 5), 3)
        self.assertEqual(shuffledsearch.search(3, a, 5), 4)
        self.assertEqual(shuffledsearch.deshuffle(3, 5), 4)
        self.assertEqual(shuffledsearch.deshuffle(4, 5), 3)

    def test_every_position(self):
        # Every value is found and maps back to its sorted position
        rng = random.Random(2)
        for n in list(range(2, 300)) + [1024, 3000]:
            values = unique_sorted(rng, n)
            shuffled = list(values)
            shuffledsearch.shuffle(shuffled)
            for i in range(n):
                index = shuffledsearch.search(values[i], shuffled, n)
                self.assertEqual(shuffled[index], values[i])
                self.assertEqual(shuffledsearch.deshuffle(index, n), i)

    def test_missing(self):
        values = list(range(0, 200, 2))
        shuffled = list(values)
        shuffledsearch.shuffle(shuffled)
        for v in range(-3, 203, 2):
            self.assertEqual(shuffledsearch.search(v, shuffled), NOT_FOUND)

    def test_empty(self):
        self.assertEqual(shuffledsearch.search(1, []), NOT_FOUND)
        self.assertEqual(shuffledsearch.search(1, [1, 2, 3], 0), NOT_FOUND)

    def test_count_prefix(self):
        a = [1, 0, 2, 7]
        self.assertEqual(shuffledsearch.search(7, a, 3), NOT_FOUND)
        self.assertEqual(shuffledsearch.search(2, a, 3), 2)

    def test_forward_only(self):
        n = 1000
        shuffled = RecordingList(layout(list(range(n))))
        for v in range(-1, n+1):
            shuffled.reads = []
            shuffledsearch.search(v, shuffled)
            reads = shuffled.reads
            self.assertEqual(reads[0], 0)
            self.assertTrue(all(a < b for a, b in zip(reads, reads[1:])),
                            reads)

    def test_key(self):
        items = [(i, 'v%d' % i) for i in range(0, 40, 3)]
        shuffled = list(items)
        shuffledsearch.shuffle(shuffled)
        k = itemgetter(0)
        for i, item in enumerate(items):
            index = shuffledsearch.search((item[0], None), shuffled, key=k)
            self.assertEqual(shuffled[index], item)
            self.assertEqual(
                shuffledsearch.deshuffle(index, len(items)), i)
        self.assertEqual(shuffledsearch.search((1, None), shuffled, key=k),
                         NOT_FOUND)

    def test_only_less_than(self):
        class LessOnly(object):
            def __init__(self, x):
                self.x = x
            def __lt__(self, other):
                return self.x < other.x
        items = [LessOnly(x) for x in range(25)]
        shuffledsearch.shuffle(items)
        for x in range(25):
            index = shuffledsearch.search(LessOnly(x), items)
            self.assertEqual(items[index].x, x)
        self.assertEqual(shuffledsearch.search(LessOnly(25), items),
                         NOT_FOUND)

class DeshuffleTest(unittest.TestCase):
    def test_matches_layout(self):
        for n in range(1, 260):
            shuffled = layout(list(range(n)))
            for index in range(n):
                self.assertEqual(shuffledsearch.deshuffle(index, n),
                                 shuffled[index])

    def test_out_of_range(self):
        for n in range(0, 20):
            self.assertEqual(shuffledsearch.deshuffle(NOT_FOUND, n), NOT_FOUND)
            self.assertEqual(shuffledsearch.deshuffle(n, n), NOT_FOUND)
            self.assertEqual(shuffledsearch.deshuffle(n+5, n), NOT_FOUND)
            self.assertEqual(shuffledsearch.deshuffle(-7, n), NOT_FOUND)

    def test_composes_with_search(self):
        shuffled = layout(list(range(10)))
        index = shuffledsearch.search(42, shuffled)
        self.assertEqual(shuffledsearch.deshuffle(index, 10), NOT_FOUND)

class ReferenceSearchTest(unittest.TestCase):
    def test_against_bisect(self):
        rng = random.Random(3)
        values = unique_sorted(rng, 500, 0, 5000)
        for v in range(-1, 5001, 7):
            i = bisect.bisect_left(values, v)
            if i < len(values) and values[i] == v:
                expected = i
            else:
                expected = NOT_FOUND
            self.assertEqual(shuffledsearch.reference_search(v, values),
                             expected)

    def test_differential(self):
        rng = random.Random(4)
        values = unique_sorted(rng, 777, 0, 3000)
        shuffled = list(values)
        shuffledsearch.shuffle(shuffled)
        for v in range(3000):
            expected = shuffledsearch.reference_search(v, values)
            found = shuffledsearch.search(v, shuffled)
            self.assertEqual(shuffledsearch.deshuffle(found, len(values)),
                             expected)

if __name__ == '__main__':
    unittest.main()

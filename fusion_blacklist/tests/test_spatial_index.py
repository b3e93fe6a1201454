"""
Tests for the spatial index module.
"""

import unittest

from fusion_blacklist.fusion import FilterReason, Fusion, Gene
from fusion_blacklist.spatial_index import (
    BUCKET_SIZE,
    FusionIndex,
    get_index_keys_from_fusion,
    get_index_keys_from_range,
)


class TestIndexKeys(unittest.TestCase):
    """
    Provides unit tests for the division of ranges into buckets.
    """
    def test_single_base(self):
        self.assertEqual(get_index_keys_from_range(0, 5, 5), [(0, 0)])

    def test_bucket_boundary(self):
        self.assertEqual(get_index_keys_from_range(0, 99999, 100001), [(0, 0), (0, 100000)])

    def test_range_within_bucket(self):
        self.assertEqual(get_index_keys_from_range(2, 100000, 199999), [(2, 100000)])

    def test_long_range(self):
        keys = get_index_keys_from_range(1, 150000, 420000)
        self.assertEqual(keys, [(1, 100000), (1, 200000), (1, 300000), (1, 400000)])

    def test_negative_start(self):
        """Ranges widened by the mate gap may start before the contig"""
        self.assertEqual(get_index_keys_from_range(0, -10, 5), [(0, -BUCKET_SIZE), (0, 0)])

    def test_fusion_keys(self):
        gene1 = Gene("A", 0, 999000, 1001000)
        gene2 = Gene("B", 1, 5000, 6000)
        fusion = Fusion(0, 999999, 1, 5500, gene1=gene1, gene2=gene2)
        self.assertEqual(
            set(get_index_keys_from_fusion(fusion)),
            {(0, 900000), (0, 1000000), (1, 0)},
        )


class TestFusionIndex(unittest.TestCase):
    """
    Provides unit tests for the fusion index.
    """
    def setUp(self):
        self.gene1 = Gene("A", 0, 999000, 1001000)
        self.gene2 = Gene("B", 1, 5000, 6000)
        self.fusion = Fusion(0, 999999, 1, 5500, gene1=self.gene1, gene2=self.gene2)
        self.other = Fusion(1, 5200, 1, 5800, gene1=self.gene2, gene2=self.gene2)

    def test_build(self):
        index = FusionIndex.build([self.fusion, self.other])
        self.assertEqual(len(index), 2)
        self.assertEqual(index.get_bucket((0, 900000)), {self.fusion})
        self.assertEqual(index.get_bucket((1, 0)), {self.fusion, self.other})

    def test_build_skips_discarded_fusions(self):
        self.other.filter = FilterReason.OTHER
        index = FusionIndex.build([self.fusion, self.other])
        self.assertNotIn(self.other, index)
        self.assertIn(self.fusion, index)

    def test_build_keeps_recoverable_fusions(self):
        self.other.filter = FilterReason.OTHER
        self.other.closest_genomic_breakpoint1 = 1200
        index = FusionIndex.build([self.fusion, self.other])
        self.assertIn(self.other, index)

    def test_remove(self):
        index = FusionIndex.build([self.fusion, self.other])
        index.remove(self.fusion)
        self.assertNotIn(self.fusion, index)
        self.assertEqual(index.get_bucket((0, 900000)), set())
        self.assertEqual(index.get_bucket((0, 1000000)), set())
        self.assertEqual(index.get_bucket((1, 0)), {self.other})

    def test_lookup_is_distinct(self):
        index = FusionIndex.build([self.fusion, self.other])
        candidates = index.lookup([(0, 900000), (0, 1000000), (1, 0)])
        self.assertEqual(len(candidates), 2)
        self.assertEqual(set(candidates), {self.fusion, self.other})

    def test_remove_while_iterating(self):
        index = FusionIndex.build([self.fusion, self.other])
        visited = []
        for fusion in index.lookup([(1, 0)]):
            visited.append(fusion)
            index.remove(fusion)
        self.assertEqual(set(visited), {self.fusion, self.other})
        self.assertEqual(len(index), 0)

    def test_lookup_unknown_bucket(self):
        index = FusionIndex.build([self.fusion])
        self.assertEqual(index.lookup([(5, 0)]), [])

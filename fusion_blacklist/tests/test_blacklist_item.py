"""
Tests for parsing of blacklist items.
"""

import unittest

from logzero import logger

from fusion_blacklist.blacklist_item import (
    BlacklistItemType,
    parse_blacklist_item,
    parse_blacklist_line,
    parse_range,
)
from fusion_blacklist.fusion import FORWARD, REVERSE, Gene


class TestParseRange(unittest.TestCase):
    """
    Provides unit tests for the conversion of ranges into coordinates.
    """
    def setUp(self):
        self.contigs = {"chr1": 0, "chr2": 1}

    def test_range(self):
        self.assertEqual(parse_range("chr1:100-200", self.contigs), (0, 99, 199, False, None))

    def test_position(self):
        self.assertEqual(parse_range("chr2:100", self.contigs), (1, 99, 99, False, None))

    def test_forward_strand(self):
        self.assertEqual(parse_range("+chr1:100-200", self.contigs), (0, 99, 199, True, FORWARD))

    def test_reverse_strand(self):
        self.assertEqual(parse_range("-chr1:100", self.contigs), (0, 99, 99, True, REVERSE))

    def test_unknown_contig(self):
        with self.assertLogs(logger, level="WARNING"):
            self.assertIsNone(parse_range("chr3:100-200", self.contigs))

    def test_malformed(self):
        for text in ("chr1", "chr1:", "chr1:abc", "chr1:100-", "chr1:100-200-300", "chr1:200-100"):
            with self.assertLogs(logger, level="WARNING"):
                self.assertIsNone(parse_range(text, self.contigs), text)


class TestParseBlacklistItem(unittest.TestCase):
    """
    Provides unit tests for the parsing of single blacklist items.
    """
    def setUp(self):
        self.contigs = {"chr1": 0, "chr2": 1}
        self.gene = Gene("GENE_A", 0, 999000, 1001000)
        self.genes = {"GENE_A": self.gene}

    def test_keywords(self):
        for keyword, item_type in (
            ("any", BlacklistItemType.ANY),
            ("split_read_donor", BlacklistItemType.SPLIT_READ_DONOR),
            ("split_read_acceptor", BlacklistItemType.SPLIT_READ_ACCEPTOR),
            ("split_read_any", BlacklistItemType.SPLIT_READ_ANY),
            ("discordant_mates", BlacklistItemType.DISCORDANT_MATES),
            ("read_through", BlacklistItemType.READ_THROUGH),
            ("low_support", BlacklistItemType.LOW_SUPPORT),
            ("filter_spliced", BlacklistItemType.FILTER_SPLICED),
            ("not_both_spliced", BlacklistItemType.NOT_BOTH_SPLICED),
        ):
            item = parse_blacklist_item(keyword, self.contigs, self.genes, allow_keyword=True)
            self.assertEqual(item.item_type, item_type)
            self.assertFalse(item.is_spatial())

    def test_keyword_not_allowed(self):
        with self.assertLogs(logger, level="WARNING"):
            self.assertIsNone(parse_blacklist_item("any", self.contigs, self.genes, allow_keyword=False))

    def test_gene(self):
        item = parse_blacklist_item("GENE_A", self.contigs, self.genes, allow_keyword=False)
        self.assertEqual(item.item_type, BlacklistItemType.GENE)
        self.assertIs(item.gene, self.gene)
        self.assertEqual((item.contig, item.start, item.end), (0, 999000, 1001000))
        self.assertTrue(item.is_spatial())

    def test_position(self):
        item = parse_blacklist_item("chr1:100", self.contigs, self.genes, allow_keyword=True)
        self.assertEqual(item.item_type, BlacklistItemType.POSITION)
        self.assertEqual((item.contig, item.start, item.end), (0, 99, 99))

    def test_single_base_range_is_position(self):
        item = parse_blacklist_item("chr1:1000000-1000000", self.contigs, self.genes, allow_keyword=True)
        self.assertEqual(item.item_type, BlacklistItemType.POSITION)
        self.assertEqual(item.start, 999999)

    def test_range(self):
        item = parse_blacklist_item("+chr2:100-200", self.contigs, self.genes, allow_keyword=True)
        self.assertEqual(item.item_type, BlacklistItemType.RANGE)
        self.assertEqual((item.contig, item.start, item.end), (1, 99, 199))
        self.assertTrue(item.strand_defined)
        self.assertEqual(item.strand, FORWARD)


class TestParseBlacklistLine(unittest.TestCase):
    """
    Provides unit tests for the parsing of blacklist lines.
    """
    def setUp(self):
        self.contigs = {"chr1": 0}
        self.genes = {"GENE_A": Gene("GENE_A", 0, 999000, 1001000)}

    def test_line(self):
        item1, item2 = parse_blacklist_line("chr1:1000000-2000000 any", self.contigs, self.genes)
        self.assertEqual(item1.item_type, BlacklistItemType.RANGE)
        self.assertEqual(item2.item_type, BlacklistItemType.ANY)

    def test_tab_separated(self):
        item1, item2 = parse_blacklist_line("GENE_A\tsplit_read_donor", self.contigs, self.genes)
        self.assertEqual(item1.item_type, BlacklistItemType.GENE)
        self.assertEqual(item2.item_type, BlacklistItemType.SPLIT_READ_DONOR)

    def test_wrong_token_count(self):
        for line in ("chr1:100", "chr1:100 any any"):
            with self.assertLogs(logger, level="WARNING"):
                self.assertIsNone(parse_blacklist_line(line, self.contigs, self.genes))

    def test_keyword_first(self):
        with self.assertLogs(logger, level="WARNING"):
            self.assertIsNone(parse_blacklist_line("any chr1:100", self.contigs, self.genes))

    def test_unparseable_second_item(self):
        with self.assertLogs(logger, level="WARNING"):
            self.assertIsNone(parse_blacklist_line("chr1:100 chrX:5", self.contigs, self.genes))

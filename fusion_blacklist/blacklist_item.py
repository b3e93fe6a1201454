"""
Parsing of blacklist rules.

A blacklist line consists of two whitespace-separated items. Each item is
either a gene name, a range ("chr:start-end"), a single position ("chr:pos")
or, for the second item only, a keyword naming a heuristic rule. Ranges
and positions may be prefixed with "+" or "-" to restrict the rule to one
strand. Coordinates are one-based in the blacklist and zero-based after
parsing.
"""

import re
from enum import Enum

from logzero import logger

from fusion_blacklist.fusion import FORWARD, REVERSE, Gene


class BlacklistItemType(Enum):
    RANGE = "range"
    POSITION = "position"
    GENE = "gene"
    ANY = "any"
    SPLIT_READ_DONOR = "split_read_donor"
    SPLIT_READ_ACCEPTOR = "split_read_acceptor"
    SPLIT_READ_ANY = "split_read_any"
    DISCORDANT_MATES = "discordant_mates"
    READ_THROUGH = "read_through"
    LOW_SUPPORT = "low_support"
    FILTER_SPLICED = "filter_spliced"
    NOT_BOTH_SPLICED = "not_both_spliced"


SPATIAL_TYPES = (
    BlacklistItemType.RANGE,
    BlacklistItemType.POSITION,
    BlacklistItemType.GENE,
)

KEYWORDS = {
    item_type.value: item_type
    for item_type in BlacklistItemType
    if item_type not in SPATIAL_TYPES
}

RANGE_PATTERN = re.compile(r"^(?P<contig>[^:]+):(?P<start>\d+)(?:-(?P<end>\d+))?$")


class BlacklistItem:
    """Class to store one side of a blacklist rule"""
    def __init__(
        self,
        item_type: BlacklistItemType,
        contig: int = None,
        start: int = None,
        end: int = None,
        gene: Gene = None,
        strand_defined: bool = False,
        strand: str = None,
    ):
        self.item_type = item_type
        self.contig = contig
        self.start = start
        self.end = end
        self.gene = gene
        self.strand_defined = strand_defined
        self.strand = strand

    def __repr__(self):
        if not self.is_spatial():
            return self.item_type.value
        strand = self.strand if self.strand_defined else ""
        return f"{self.item_type.value}({strand}{self.contig}:{self.start}-{self.end})"

    def is_spatial(self) -> bool:
        """Only ranges, positions and genes can be looked up by coordinate"""
        return self.item_type in SPATIAL_TYPES


def parse_range(text: str, contigs: dict) -> tuple:
    """Convert the string representation of a range into zero-based coordinates.

    Args:
        text (str): range in the format [+-]contig:start-end or [+-]contig:position
        contigs (dict): contig names mapped to contig ids

    Returns:
        tuple: (contig, start, end, strand_defined, strand) or None if the
        text is malformed or refers to an unknown contig
    """
    strand_defined = False
    strand = None
    range_text = text
    if range_text.startswith("+"):
        strand_defined, strand = True, FORWARD
        range_text = range_text[1:]
    elif range_text.startswith("-"):
        strand_defined, strand = True, REVERSE
        range_text = range_text[1:]

    match = RANGE_PATTERN.match(range_text)
    if not match:
        logger.warning("unknown gene or malformed range: {}".format(text))
        return None
    if match.group("contig") not in contigs:
        logger.warning("unknown gene or malformed range: {}".format(text))
        return None
    contig = contigs[match.group("contig")]

    # convert to zero-based coordinates
    start = int(match.group("start")) - 1
    if match.group("end") is None:
        end = start
    else:
        end = int(match.group("end")) - 1
    if end < start:
        logger.warning("unknown gene or malformed range: {}".format(text))
        return None

    return contig, start, end, strand_defined, strand


def parse_blacklist_item(text: str, contigs: dict, genes: dict, allow_keyword: bool) -> BlacklistItem:
    """Parse the string representation of one item of a blacklist rule"""
    if allow_keyword and text in KEYWORDS:
        return BlacklistItem(KEYWORDS[text])

    if text in genes:
        gene = genes[text]
        return BlacklistItem(
            BlacklistItemType.GENE,
            contig=gene.contig,
            start=gene.start,
            end=gene.end,
            gene=gene,
        )

    parsed_range = parse_range(text, contigs)
    if parsed_range is None:
        return None
    contig, start, end, strand_defined, strand = parsed_range
    if start == end:
        item_type = BlacklistItemType.POSITION
    else:
        item_type = BlacklistItemType.RANGE
    return BlacklistItem(
        item_type,
        contig=contig,
        start=start,
        end=end,
        strand_defined=strand_defined,
        strand=strand,
    )


def parse_blacklist_line(line: str, contigs: dict, genes: dict) -> tuple:
    """Parse a blacklist line into a pair of items, None if the line is malformed"""
    tokens = line.split()
    if len(tokens) != 2:
        logger.warning("malformed blacklist line: {}".format(line.rstrip("\n")))
        return None
    # only the second item may be a keyword
    item1 = parse_blacklist_item(tokens[0], contigs, genes, allow_keyword=False)
    if item1 is None:
        return None
    item2 = parse_blacklist_item(tokens[1], contigs, genes, allow_keyword=True)
    if item2 is None:
        return None
    return item1, item2

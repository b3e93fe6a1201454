"""
Matching of blacklist items against the breakpoints of a fusion.
"""

from fusion_blacklist.blacklist_item import BlacklistItem, BlacklistItemType
from fusion_blacklist.fusion import DOWNSTREAM, UPSTREAM, Fusion


def overlapping_fraction(start1: int, end1: int, start2: int, end2: int) -> float:
    """Return the fraction of range1 which overlaps range2 (inclusive coordinates)"""
    if start1 >= start2 and end1 <= end2:
        return 1.0
    overlap = min(end1, end2) - max(start1, start2) + 1
    if overlap <= 0:
        return 0.0
    return overlap / (end1 - start1 + 1)


def _matches_strand(item: BlacklistItem, fusion: Fusion, which_breakpoint: int) -> bool:
    if not item.strand_defined:
        return True
    # unknown strands never veto
    if fusion.predicted_strands_ambiguous:
        return True
    return fusion.get_strand(which_breakpoint) == item.strand


def _matches_position(
    item: BlacklistItem, fusion: Fusion, which_breakpoint: int, max_mate_gap: int
) -> bool:
    if fusion.get_contig(which_breakpoint) != item.contig:
        return False
    if not _matches_strand(item, fusion, which_breakpoint):
        return False

    bp_pos = fusion.get_breakpoint(which_breakpoint)
    if bp_pos == item.start:
        return True

    # without split reads the breakpoint is only estimated from the mates,
    # which must lie within the gap on the side facing the position
    if fusion.split_reads1 + fusion.split_reads2 == 0:
        direction = fusion.get_direction(which_breakpoint)
        if direction == DOWNSTREAM and item.start - max_mate_gap <= bp_pos <= item.start:
            return True
        if direction == UPSTREAM and item.start <= bp_pos <= item.start + max_mate_gap:
            return True

    return False


def _matches_range(item: BlacklistItem, fusion: Fusion, which_breakpoint: int) -> bool:
    if fusion.get_contig(which_breakpoint) != item.contig:
        return False
    if not _matches_strand(item, fusion, which_breakpoint):
        return False

    # the gene of the breakpoint must lie mostly within the blacklisted range
    gene = fusion.get_gene(which_breakpoint)
    if gene is None:
        return False
    return overlapping_fraction(gene.start, gene.end, item.start, item.end) > 0.5


def matches_blacklist_item(
    item: BlacklistItem,
    fusion: Fusion,
    which_breakpoint: int,
    evalue_cutoff: float,
    max_mate_gap: int,
) -> bool:
    """
    Check if the given breakpoint (1 or 2) of a fusion matches a blacklist item
    """
    item_type = item.item_type
    other_breakpoint = 2 if which_breakpoint == 1 else 1

    if item_type == BlacklistItemType.ANY:
        return True
    if item_type == BlacklistItemType.SPLIT_READ_DONOR:
        return fusion.discordant_mates + fusion.get_split_reads(which_breakpoint) == 0
    if item_type == BlacklistItemType.SPLIT_READ_ACCEPTOR:
        return fusion.discordant_mates + fusion.get_split_reads(other_breakpoint) == 0
    if item_type == BlacklistItemType.SPLIT_READ_ANY:
        return fusion.discordant_mates == 0
    if item_type == BlacklistItemType.DISCORDANT_MATES:
        return fusion.split_reads1 + fusion.split_reads2 == 0
    if item_type == BlacklistItemType.READ_THROUGH:
        return fusion.is_read_through()
    if item_type == BlacklistItemType.LOW_SUPPORT:
        return fusion.evalue > evalue_cutoff
    if item_type == BlacklistItemType.FILTER_SPLICED:
        return fusion.evalue > evalue_cutoff and fusion.spliced1 and fusion.spliced2
    if item_type == BlacklistItemType.NOT_BOTH_SPLICED:
        return not fusion.spliced1 or not fusion.spliced2
    if item_type == BlacklistItemType.GENE:
        gene = fusion.get_gene(which_breakpoint)
        return gene is not None and gene is item.gene
    if item_type == BlacklistItemType.POSITION:
        return _matches_position(item, fusion, which_breakpoint, max_mate_gap)
    if item_type == BlacklistItemType.RANGE:
        return _matches_range(item, fusion, which_breakpoint)
    return False


def matches_blacklist_rule(
    item1: BlacklistItem,
    item2: BlacklistItem,
    fusion: Fusion,
    evalue_cutoff: float,
    max_mate_gap: int,
) -> bool:
    """A rule matches if its items match the breakpoints of the fusion in either order"""
    return (
        matches_blacklist_item(item1, fusion, 1, evalue_cutoff, max_mate_gap)
        and matches_blacklist_item(item2, fusion, 2, evalue_cutoff, max_mate_gap)
    ) or (
        matches_blacklist_item(item1, fusion, 2, evalue_cutoff, max_mate_gap)
        and matches_blacklist_item(item2, fusion, 1, evalue_cutoff, max_mate_gap)
    )

#!/usr/bin/env python3

"""
Remove fusion candidates which coincide with blacklisted regions
Every line of the blacklist holds a pair of items (ranges, positions, genes or
keywords for heuristic rules). A fusion is discarded, if the items match its two
breakpoints in either order. Fusions are indexed by genomic coordinate, such that
only the fusions near a blacklisted region are checked against a rule. Since the
first item of a line cannot be a keyword, every rule has coordinates to look up.
"""

import logzero
from logzero import logger

from fusion_blacklist.blacklist_item import BlacklistItem, parse_blacklist_line
from fusion_blacklist.fusion import FilterReason
from fusion_blacklist.io_methods import (
    build_contig_table,
    load_fusions,
    load_genes,
    read_blacklist,
    read_fusion_table,
    read_gene_table,
    write_fusions,
)
from fusion_blacklist.matching import matches_blacklist_rule
from fusion_blacklist.misc.config import (
    DEFAULT_EVALUE_CUTOFF,
    DEFAULT_MAX_MATE_GAP,
    BlacklistFilterConfiguration,
)
from fusion_blacklist.spatial_index import FusionIndex, get_index_keys_from_range


def get_index_keys_from_item(item: BlacklistItem, max_mate_gap: int) -> list:
    """Keys of all buckets near a blacklist item, keywords have no coordinates"""
    if not item.is_spatial():
        return []
    return get_index_keys_from_range(item.contig, item.start - max_mate_gap, item.end + max_mate_gap)


def is_comment(line: str) -> bool:
    return not line.strip() or line.startswith("#")


def filter_blacklisted_ranges(
    fusions,
    blacklist_file_path: str,
    contigs: dict,
    genes: dict,
    evalue_cutoff: float,
    max_mate_gap: int,
) -> int:
    """Tag fusions matching a blacklist rule and return the number of remaining fusions.

    Args:
        fusions: collection of Fusion objects (a dict is treated by its values)
        blacklist_file_path (str): plain or gzip-compressed blacklist
        contigs (dict): contig names mapped to contig ids
        genes (dict): gene names mapped to Gene objects
        evalue_cutoff (float): fusions above this e-value count as low support
        max_mate_gap (int): maximum distance of discordant mates to a blacklisted position

    Returns:
        int: number of fusions without a filter tag
    """
    if isinstance(fusions, dict):
        fusions = fusions.values()

    index = FusionIndex.build(fusions)
    logger.info("Indexed {} fusions by coordinate".format(len(index)))

    rules = 0
    skipped_lines = 0
    filtered = 0
    for line in read_blacklist(blacklist_file_path):
        if is_comment(line):
            continue

        rule = parse_blacklist_line(line, contigs, genes)
        if rule is None:
            skipped_lines += 1
            continue
        item1, item2 = rule
        rules += 1

        # find all fusions with breakpoints in the vicinity of the blacklist items
        index_keys = get_index_keys_from_item(item1, max_mate_gap)
        index_keys.extend(get_index_keys_from_item(item2, max_mate_gap))
        for fusion in index.lookup(index_keys):
            if matches_blacklist_rule(item1, item2, fusion, evalue_cutoff, max_mate_gap):
                logger.debug("Blacklist rule '{0}' matches {1}".format(line, fusion))
                fusion.filter = FilterReason.BLACKLIST
                # later lines must not see it again
                index.remove(fusion)
                filtered += 1

    remaining = sum(1 for fusion in fusions if fusion.filter is None)
    logger.info(
        "Applied {0} blacklist rules ({1} lines skipped), filtered {2} fusions, {3} remaining".format(
            rules, skipped_lines, filtered, remaining
        )
    )
    return remaining


def add_blacklist_filter_args(parser):
    parser.add_argument(
        "-f",
        "--fusions",
        dest="fusions",
        help="Tab-separated table of fusion candidates",
        required=True,
    )
    parser.add_argument(
        "-g",
        "--genes",
        dest="genes",
        help="Tab-separated table of gene coordinates (gene_name, contig, start, end)",
        required=True,
    )
    parser.add_argument(
        "-b",
        "--blacklist",
        dest="blacklist",
        help="Blacklist of ranges, positions and genes (optionally gzip-compressed)",
        required=True,
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        help="Output table of fusion candidates with updated filter column",
        required=True,
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config",
        help="Config file with a [blacklist] section",
        default=None,
    )
    parser.add_argument(
        "-E",
        "--evalue-cutoff",
        dest="evalue_cutoff",
        type=float,
        help="E-value above which fusions count as low support "
             "(default: {} or the value from the config file)".format(DEFAULT_EVALUE_CUTOFF),
        default=None,
    )
    parser.add_argument(
        "-G",
        "--max-mate-gap",
        dest="max_mate_gap",
        type=int,
        help="Maximum distance of discordant mates to a blacklisted position "
             "(default: {} or the value from the config file)".format(DEFAULT_MAX_MATE_GAP),
        default=None,
    )
    parser.add_argument(
        "-l", "--logger", dest="logger", help="Logging of processing steps", default=""
    )
    parser.set_defaults(func=blacklist_filter_command)


def blacklist_filter_command(args):
    if args.logger:
        logzero.logfile(args.logger)

    evalue_cutoff = DEFAULT_EVALUE_CUTOFF
    max_mate_gap = DEFAULT_MAX_MATE_GAP
    if args.config:
        config = BlacklistFilterConfiguration(args.config)
        evalue_cutoff = config.get_evalue_cutoff()
        max_mate_gap = config.get_max_mate_gap()
    if args.evalue_cutoff is not None:
        evalue_cutoff = args.evalue_cutoff
    if args.max_mate_gap is not None:
        max_mate_gap = args.max_mate_gap

    genes_df = read_gene_table(args.genes)
    fusions_df = read_fusion_table(args.fusions)
    contigs = build_contig_table(genes_df["contig"], fusions_df["contig1"], fusions_df["contig2"])
    genes = load_genes(genes_df, contigs)
    fusions = load_fusions(fusions_df, contigs, genes)
    logger.info("Loaded {0} genes and {1} fusions".format(len(genes), len(fusions)))

    remaining = filter_blacklisted_ranges(
        fusions, args.blacklist, contigs, genes, evalue_cutoff, max_mate_gap
    )
    write_fusions(fusions_df, fusions, args.output)
    logger.info("Wrote {0} fusions ({1} remaining) to {2}".format(len(fusions), remaining, args.output))

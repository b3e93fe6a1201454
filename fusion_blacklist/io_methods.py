"""
This module handles loading of the blacklist and of the gene and fusion tables.
"""

import gzip

import pandas as pd
from logzero import logger

from fusion_blacklist.fusion import FORWARD, REVERSE, FilterReason, Fusion, Gene

GZIP_MAGIC = b"\x1f\x8b"

GENE_COLUMNS = ["gene_name", "contig", "start", "end"]

FUSION_COLUMNS = [
    "fusion_id",
    "contig1",
    "breakpoint1",
    "strand1",
    "direction1",
    "gene1",
    "contig2",
    "breakpoint2",
    "strand2",
    "direction2",
    "gene2",
    "split_reads1",
    "split_reads2",
    "discordant_mates",
    "spliced1",
    "spliced2",
    "read_through",
    "evalue",
]

TRUE_VALUES = ("true", "yes", "1")


def is_gzipped(file_path: str) -> bool:
    with open(file_path, "rb") as infile:
        return infile.read(2) == GZIP_MAGIC


def read_blacklist(blacklist_file_path: str):
    """Yield the lines of a plain or gzip-compressed blacklist file"""
    if is_gzipped(blacklist_file_path):
        blacklist_file = gzip.open(blacklist_file_path, "rt", encoding="utf8")
    else:
        blacklist_file = open(blacklist_file_path, "r", encoding="utf8")
    with blacklist_file:
        for line in blacklist_file:
            yield line.rstrip("\n")


def check_columns(table: pd.DataFrame, required_columns: list, table_file: str):
    missing = [column for column in required_columns if column not in table.columns]
    if missing:
        raise ValueError("Missing columns {0} in {1}".format(",".join(missing), table_file))


def build_contig_table(*contig_name_lists) -> dict:
    """Assign an id to every distinct contig name, in order of appearance"""
    contigs = {}
    for contig_names in contig_name_lists:
        for contig_name in contig_names:
            if contig_name not in contigs:
                contigs[contig_name] = len(contigs)
    return contigs


def read_gene_table(genes_table: str) -> pd.DataFrame:
    genes_df = pd.read_csv(genes_table, sep="\t", dtype={"gene_name": str, "contig": str})
    check_columns(genes_df, GENE_COLUMNS, genes_table)
    return genes_df


def read_fusion_table(fusions_table: str) -> pd.DataFrame:
    fusions_df = pd.read_csv(
        fusions_table,
        sep="\t",
        dtype={"fusion_id": str, "contig1": str, "contig2": str, "gene1": str, "gene2": str},
        keep_default_na=False,
    )
    check_columns(fusions_df, FUSION_COLUMNS, fusions_table)
    return fusions_df


def load_genes(genes_df: pd.DataFrame, contigs: dict) -> dict:
    """Create Gene objects from a gene table with one-based, inclusive coordinates.

    Args:
        genes_df (pd.DataFrame): table with the columns gene_name, contig, start, end
        contigs (dict): contig names mapped to contig ids

    Returns:
        dict: gene names mapped to Gene objects with zero-based coordinates
    """
    genes = {}
    for row in genes_df.itertuples(index=False):
        if row.gene_name in genes:
            logger.debug("Skipping duplicate gene {}".format(row.gene_name))
            continue
        genes[row.gene_name] = Gene(
            row.gene_name, contigs[row.contig], int(row.start) - 1, int(row.end) - 1
        )
    return genes


def to_bool(value) -> bool:
    return str(value).strip().lower() in TRUE_VALUES


def to_filter(value) -> FilterReason:
    value = str(value).strip()
    if value in ("", ".", "nan"):
        return None
    if value == FilterReason.BLACKLIST.value:
        return FilterReason.BLACKLIST
    return FilterReason.OTHER


def lookup_gene(genes: dict, gene_name: str, fusion_id: str) -> Gene:
    if gene_name in ("", "."):
        return None
    if gene_name not in genes:
        raise ValueError("Unknown gene {0} in fusion {1}".format(gene_name, fusion_id))
    return genes[gene_name]


def load_fusions(fusions_df: pd.DataFrame, contigs: dict, genes: dict) -> dict:
    """Create Fusion objects from a fusion table with one-based breakpoints.

    Args:
        fusions_df (pd.DataFrame): table with (at least) the FUSION_COLUMNS
        contigs (dict): contig names mapped to contig ids
        genes (dict): gene names mapped to Gene objects

    Returns:
        dict: fusion ids mapped to Fusion objects, in table order
    """
    fusions = {}
    for row in fusions_df.to_dict("records"):
        fusion_id = row["fusion_id"]
        strand1 = row["strand1"]
        strand2 = row["strand2"]
        strands_ambiguous = to_bool(row.get("strands_ambiguous", False)) or \
            strand1 not in (FORWARD, REVERSE) or strand2 not in (FORWARD, REVERSE)
        fusion = Fusion(
            contig1=contigs[row["contig1"]],
            breakpoint1=int(row["breakpoint1"]) - 1,
            contig2=contigs[row["contig2"]],
            breakpoint2=int(row["breakpoint2"]) - 1,
            gene1=lookup_gene(genes, row["gene1"], fusion_id),
            gene2=lookup_gene(genes, row["gene2"], fusion_id),
            predicted_strand1=strand1,
            predicted_strand2=strand2,
            predicted_strands_ambiguous=strands_ambiguous,
            direction1=row["direction1"],
            direction2=row["direction2"],
            split_reads1=int(row["split_reads1"]),
            split_reads2=int(row["split_reads2"]),
            discordant_mates=int(row["discordant_mates"]),
            spliced1=to_bool(row["spliced1"]),
            spliced2=to_bool(row["spliced2"]),
            read_through=to_bool(row["read_through"]),
            evalue=float(row["evalue"]),
            fusion_id=fusion_id,
        )
        fusion.filter = to_filter(row.get("filter", ""))
        if str(row.get("closest_genomic_breakpoint1", "")).strip() not in ("", "."):
            fusion.closest_genomic_breakpoint1 = int(row["closest_genomic_breakpoint1"])
        if fusion_id in fusions:
            raise ValueError("Duplicate fusion id {}".format(fusion_id))
        fusions[fusion_id] = fusion
    return fusions


def write_fusions(fusions_df: pd.DataFrame, fusions: dict, output_table: str):
    """Write the fusion table with the filter column updated by the blacklist filter"""
    if "filter" not in fusions_df.columns:
        fusions_df["filter"] = ""
    for i in fusions_df.index:
        fusion = fusions[fusions_df.loc[i, "fusion_id"]]
        if fusion.filter == FilterReason.BLACKLIST:
            fusions_df.loc[i, "filter"] = FilterReason.BLACKLIST.value
    fusions_df.to_csv(output_table, sep="\t", index=False)

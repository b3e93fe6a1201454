"""
Module for the Gene and Fusion classes consumed by the blacklist filter.
"""

from enum import Enum

FORWARD = "+"
REVERSE = "-"

UPSTREAM = "upstream"
DOWNSTREAM = "downstream"


class FilterReason(Enum):
    """Reason why a fusion candidate was rejected"""
    BLACKLIST = "blacklist"
    OTHER = "other"


class Gene:
    """Class to store gene coordinates (zero-based, inclusive)"""
    def __init__(self, name: str, contig: int, start: int, end: int):
        self.name = name
        self.contig = contig
        self.start = start
        self.end = end

    def __repr__(self):
        return f"{self.name}({self.contig}:{self.start}-{self.end})"

    def __len__(self):
        return self.end - self.start + 1


class Fusion:
    """Class to store a fusion candidate and its supporting evidence"""
    def __init__(
        self,
        contig1: int,
        breakpoint1: int,
        contig2: int,
        breakpoint2: int,
        gene1: Gene = None,
        gene2: Gene = None,
        predicted_strand1: str = FORWARD,
        predicted_strand2: str = FORWARD,
        predicted_strands_ambiguous: bool = False,
        direction1: str = DOWNSTREAM,
        direction2: str = UPSTREAM,
        split_reads1: int = 0,
        split_reads2: int = 0,
        discordant_mates: int = 0,
        spliced1: bool = False,
        spliced2: bool = False,
        read_through: bool = False,
        evalue: float = 0.0,
        fusion_id: str = "",
    ):
        self.fusion_id = fusion_id
        self.contig1 = contig1
        self.breakpoint1 = breakpoint1
        self.contig2 = contig2
        self.breakpoint2 = breakpoint2
        self.gene1 = gene1
        self.gene2 = gene2
        self.predicted_strand1 = predicted_strand1
        self.predicted_strand2 = predicted_strand2
        self.predicted_strands_ambiguous = predicted_strands_ambiguous
        self.direction1 = direction1
        self.direction2 = direction2
        self.split_reads1 = split_reads1
        self.split_reads2 = split_reads2
        self.discordant_mates = discordant_mates
        self.spliced1 = spliced1
        self.spliced2 = spliced2
        self.read_through = read_through
        self.evalue = evalue
        self.filter = None
        # used by the genomic support filter to recover discarded fusions,
        # negative if there is nothing to recover from
        self.closest_genomic_breakpoint1 = -1

    def __repr__(self):
        return (
            f"Fusion({self.fusion_id}: {self.contig1}:{self.breakpoint1}"
            f"_{self.contig2}:{self.breakpoint2}, filter={self.filter})"
        )

    def is_read_through(self) -> bool:
        return self.read_through

    def is_filtered(self) -> bool:
        return self.filter is not None

    def is_recoverable(self) -> bool:
        """Whether a filtered fusion may still be recovered by the genomic support filter"""
        return self.closest_genomic_breakpoint1 >= 0

    def get_contig(self, which_breakpoint: int) -> int:
        return self.contig1 if which_breakpoint == 1 else self.contig2

    def get_breakpoint(self, which_breakpoint: int) -> int:
        return self.breakpoint1 if which_breakpoint == 1 else self.breakpoint2

    def get_gene(self, which_breakpoint: int) -> Gene:
        return self.gene1 if which_breakpoint == 1 else self.gene2

    def get_strand(self, which_breakpoint: int) -> str:
        return self.predicted_strand1 if which_breakpoint == 1 else self.predicted_strand2

    def get_direction(self, which_breakpoint: int) -> str:
        return self.direction1 if which_breakpoint == 1 else self.direction2

    def get_split_reads(self, which_breakpoint: int) -> int:
        return self.split_reads1 if which_breakpoint == 1 else self.split_reads2

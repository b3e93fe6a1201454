"""
Index of fusion candidates by genomic coordinate.

The genome is divided into buckets of fixed size. A fusion is stored in
every bucket covered by one of its breakpoints or by the span of one of its
genes, so that all fusions near a blacklisted region are found by looking
up the buckets of that region.
"""

from fusion_blacklist.fusion import Fusion

BUCKET_SIZE = 100000  # bp


def get_index_keys_from_range(contig: int, start: int, end: int) -> list:
    """Return the keys of all buckets which overlap the range [start, end]"""
    # floor division rounds towards negative infinity,
    # so ranges widened beyond the start of the contig are handled as well
    return [
        (contig, bucket * BUCKET_SIZE)
        for bucket in range(start // BUCKET_SIZE, end // BUCKET_SIZE + 1)
    ]


def get_index_keys_from_fusion(fusion: Fusion) -> list:
    index_keys = []
    index_keys.extend(get_index_keys_from_range(fusion.contig1, fusion.breakpoint1, fusion.breakpoint1))
    index_keys.extend(get_index_keys_from_range(fusion.contig2, fusion.breakpoint2, fusion.breakpoint2))
    if fusion.gene1 is not None:
        index_keys.extend(get_index_keys_from_range(fusion.contig1, fusion.gene1.start, fusion.gene1.end))
    if fusion.gene2 is not None:
        index_keys.extend(get_index_keys_from_range(fusion.contig2, fusion.gene2.start, fusion.gene2.end))
    return index_keys


class FusionIndex:
    """Buckets of fusion candidates keyed by (contig, bucket start)"""
    def __init__(self):
        self.fusions_by_coordinate = {}
        self.index_keys_by_fusion = {}

    def __len__(self):
        return len(self.index_keys_by_fusion)

    def __contains__(self, fusion: Fusion) -> bool:
        return fusion in self.index_keys_by_fusion

    @classmethod
    def build(cls, fusions) -> "FusionIndex":
        """Index all fusions which are not already discarded for good"""
        index = cls()
        for fusion in fusions:
            if fusion.is_filtered() and not fusion.is_recoverable():
                continue
            index.add(fusion)
        return index

    def add(self, fusion: Fusion):
        index_keys = set(get_index_keys_from_fusion(fusion))
        for index_key in index_keys:
            self.fusions_by_coordinate.setdefault(index_key, set()).add(fusion)
        self.index_keys_by_fusion.setdefault(fusion, set()).update(index_keys)

    def remove(self, fusion: Fusion):
        """Remove a fusion from all buckets it occupies"""
        for index_key in self.index_keys_by_fusion.pop(fusion, ()):
            bucket = self.fusions_by_coordinate[index_key]
            bucket.discard(fusion)
            if not bucket:
                del self.fusions_by_coordinate[index_key]

    def get_bucket(self, index_key: tuple) -> set:
        return self.fusions_by_coordinate.get(index_key, set())

    def lookup(self, index_keys: list) -> list:
        """
        Return the distinct fusions found in the given buckets.
        The result is a snapshot, i.e., fusions can safely be removed
        from the index while iterating over it.
        """
        candidates = {}
        for index_key in index_keys:
            for fusion in self.get_bucket(index_key):
                candidates[fusion] = None
        return list(candidates)

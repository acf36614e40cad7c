"""
ReadsAnalyzer v0.1.0

K-mer frequency table.

Counts every fixed-length substring (k-mer) of the reads fed to it. Counts
only grow; a k-mer enters the table with count 1 on first observation.

Author: ReadsAnalyzer Development Team
License: MIT
"""

import logging
from typing import Dict, Set

import numpy as np

from .exceptions import EmptyTableError, UnknownKeyError
from .processor import abundance_distribution, check_sequence

logger = logging.getLogger(__name__)


class KmerFrequencyTable:
    """
    Abundance table of k-mers of a fixed length k.

    Example:
        >>> table = KmerFrequencyTable(3)
        >>> table.process_read("ACGTACG")
        >>> table.abundance("ACG")
        2
    """

    def __init__(self, k: int):
        """
        Initialize an empty table.

        Args:
            k: K-mer length (positive integer)
        """
        if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
            raise ValueError(f"K-mer size must be a positive integer, got {k!r}")

        self.k = k
        self._counts: Dict[str, int] = {}

        self.stats = {
            'reads_processed': 0,
            'kmers_extracted': 0,
        }

    def process_read(self, sequence: str) -> None:
        """
        Extract every k-mer of a read and update its abundance.

        Reads shorter than k contribute nothing.
        """
        sequence = check_sequence(sequence)
        k = self.k
        counts = self._counts

        extracted = 0
        for i in range(len(sequence) - k + 1):
            kmer = sequence[i:i + k]
            counts[kmer] = counts.get(kmer, 0) + 1
            extracted += 1

        self.stats['reads_processed'] += 1
        self.stats['kmers_extracted'] += extracted

    def distinct_kmers(self) -> Set[str]:
        """Set of k-mers observed so far."""
        return set(self._counts)

    def abundance(self, kmer: str) -> int:
        """
        Number of times a k-mer has been extracted.

        Raises:
            UnknownKeyError: If the k-mer was never observed
        """
        try:
            return self._counts[kmer]
        except KeyError:
            raise UnknownKeyError(kmer, kind="k-mer") from None

    def abundance_distribution(self) -> np.ndarray:
        """
        Distribution of k-mer abundances.

        Returns:
            Array where index c holds the number of distinct k-mers observed
            exactly c times. Index 0 is always 0.

        Raises:
            EmptyTableError: If no k-mer has been observed
        """
        return abundance_distribution(
            self._counts.values(), EmptyTableError, what="k-mers"
        )

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, kmer: object) -> bool:
        return kmer in self._counts

    def __repr__(self) -> str:
        return (f"KmerFrequencyTable(k={self.k}, distinct={len(self._counts)}, "
                f"extracted={self.stats['kmers_extracted']})")

"""
ReadsAnalyzer v0.1.0

Incremental overlap graph and greedy layout assembly.

Nodes are distinct read sequences; a directed edge A -> B records the
maximal exact overlap between a suffix of A and a prefix of B, provided
it reaches the minimum overlap threshold.

Overlap notation: A overlaps B
    A: --------------->
    B:       ---------------->
         <--overlap-->

The graph is maintained incrementally. Each newly seen sequence is
compared once against every known sequence in both directions, so the
final edge set depends only on the set of distinct sequences, not on the
order in which reads arrive. Adjacency lists are kept in insertion order,
which makes the greedy layout reproducible.

Author: ReadsAnalyzer Development Team
License: MIT
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Set

import numpy as np

from .exceptions import EmptyAssemblyError, EmptyGraphError, UnknownKeyError
from .processor import abundance_distribution, check_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadOverlap:
    """
    Overlap edge between two read sequences.

    Attributes:
        source_sequence: Sequence whose suffix overlaps
        dest_sequence: Sequence whose prefix is overlapped
        overlap_length: Length of the exact suffix/prefix match
    """
    source_sequence: str
    dest_sequence: str
    overlap_length: int

    def __str__(self) -> str:
        return f"{self.source_sequence} -> {self.dest_sequence} ({self.overlap_length}bp)"


class SourcePolicy(Enum):
    """How the graph picks the sequence that starts the layout path."""
    # First sequence without predecessors; min in-degree when every node has one
    ZERO_IN_DEGREE = "zero_in_degree"
    # Destination with the fewest incoming edges; never a zero in-degree node
    MIN_POSITIVE_IN_DEGREE = "min_positive_in_degree"


def overlap_length(sequence1: str, sequence2: str) -> int:
    """
    Length of the longest suffix of sequence1 equal to a prefix of sequence2.

    Candidate lengths are tried from min(len1, len2) down to 1, so the first
    match is the maximal one.

    Example:
        >>> overlap_length("ACGTAC", "TACGGT")
        3
    """
    for length in range(min(len(sequence1), len(sequence2)), 0, -1):
        if sequence1.endswith(sequence2[:length]):
            return length
    return 0


class OverlapGraph:
    """
    Overlap graph over the distinct sequences of a read set.

    Nodes = distinct read sequences (with abundance)
    Edges = ReadOverlap objects, stored in the adjacency list of their source
    """

    def __init__(
        self,
        min_overlap: int,
        allow_self_loops: bool = False,
        source_policy: SourcePolicy = SourcePolicy.ZERO_IN_DEGREE
    ):
        """
        Initialize an empty overlap graph.

        Args:
            min_overlap: Minimum overlap length for an edge to be recorded
            allow_self_loops: Record the edge from a new sequence to itself
                found by the predecessor scan (off by default)
            source_policy: Rule used by source_sequence()
        """
        if isinstance(min_overlap, bool) or not isinstance(min_overlap, int) or min_overlap <= 0:
            raise ValueError(f"Minimum overlap must be a positive integer, got {min_overlap!r}")

        self.min_overlap = min_overlap
        self.allow_self_loops = allow_self_loops
        self.source_policy = SourcePolicy(source_policy)

        # Both maps share the same keys, in first-seen order
        self._abundance: Dict[str, int] = {}
        self._adjacency: Dict[str, List[ReadOverlap]] = {}

        self.stats = {
            'reads_processed': 0,
            'distinct_sequences': 0,
            'overlaps_found': 0,
        }

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def process_read(self, sequence: str) -> None:
        """
        Add a read sequence to the graph.

        A repeated sequence only increases its abundance. A new sequence is
        compared against every known sequence: first as a predecessor of
        each of them (its own successor list), then as a successor of each
        of them (appended to their lists).
        """
        sequence = check_sequence(sequence)
        self.stats['reads_processed'] += 1

        if sequence in self._abundance:
            self._abundance[sequence] += 1
            return

        self._abundance[sequence] = 1
        self.stats['distinct_sequences'] += 1

        successors = []
        for existing in self._adjacency:
            length = overlap_length(sequence, existing)
            if length >= self.min_overlap:
                successors.append(ReadOverlap(sequence, existing, length))
        self._adjacency[sequence] = successors
        found = len(successors)

        # The new sequence is already a key here, so it meets itself
        for existing, edges in self._adjacency.items():
            if existing == sequence and not self.allow_self_loops:
                continue
            length = overlap_length(existing, sequence)
            if length >= self.min_overlap:
                edges.append(ReadOverlap(existing, sequence, length))
                found += 1

        self.stats['overlaps_found'] += found
        logger.debug(f"New sequence #{len(self._abundance)} added {found} overlaps")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def distinct_sequences(self) -> Set[str]:
        """Set of distinct sequences added to the graph."""
        return set(self._abundance)

    def sequence_abundance(self, sequence: str) -> int:
        """
        Number of times a sequence has been added.

        Raises:
            UnknownKeyError: If the sequence was never added
        """
        try:
            return self._abundance[sequence]
        except KeyError:
            raise UnknownKeyError(sequence) from None

    def successors(self, sequence: str) -> List[ReadOverlap]:
        """Outgoing overlaps of a sequence, in the order they were found."""
        try:
            return list(self._adjacency[sequence])
        except KeyError:
            raise UnknownKeyError(sequence) from None

    def edges(self) -> List[ReadOverlap]:
        """All overlap edges, grouped by source in first-seen order."""
        return [edge for edges in self._adjacency.values() for edge in edges]

    def abundance_distribution(self) -> np.ndarray:
        """
        Distribution of sequence abundances.

        Returns:
            Array where index c holds the number of distinct sequences added
            exactly c times. Index 0 is always 0.

        Raises:
            EmptyGraphError: If the graph has no sequences
        """
        return abundance_distribution(
            self._abundance.values(), EmptyGraphError, what="sequences"
        )

    def overlap_distribution(self) -> np.ndarray:
        """
        Distribution of the number of successors.

        Returns:
            Array where index d holds the number of distinct sequences with
            exactly d outgoing overlaps.

        Raises:
            EmptyGraphError: If the graph has no sequences
        """
        return abundance_distribution(
            (len(edges) for edges in self._adjacency.values()),
            EmptyGraphError,
            what="sequences"
        )

    # ------------------------------------------------------------------
    # Layout and assembly
    # ------------------------------------------------------------------

    def _in_degrees(self, ignore_self_loops: bool) -> Dict[str, int]:
        """Incoming edge counts, keyed by destination in order of first appearance."""
        in_degree: Dict[str, int] = {}
        for edges in self._adjacency.values():
            for edge in edges:
                if ignore_self_loops and edge.source_sequence == edge.dest_sequence:
                    continue
                in_degree[edge.dest_sequence] = in_degree.get(edge.dest_sequence, 0) + 1
        return in_degree

    def source_sequence(self) -> str:
        """
        Sequence predicted to be the leftmost read of the assembly.

        With SourcePolicy.ZERO_IN_DEGREE this is the first-seen sequence
        without predecessors (self-loops do not count). If every sequence
        has a predecessor, the one with the fewest wins.

        With SourcePolicy.MIN_POSITIVE_IN_DEGREE only sequences that are the
        destination of some edge are candidates, and the one with the fewest
        incoming edges wins. A sequence with no predecessors is never chosen.

        Ties go to the earliest candidate.

        Raises:
            EmptyGraphError: If the graph is empty, or the policy finds no
                candidate
        """
        if not self._abundance:
            raise EmptyGraphError("Overlap graph has no sequences")

        if self.source_policy is SourcePolicy.ZERO_IN_DEGREE:
            in_degree = self._in_degrees(ignore_self_loops=True)
            for sequence in self._abundance:
                if sequence not in in_degree:
                    return sequence
        else:
            in_degree = self._in_degrees(ignore_self_loops=False)

        if not in_degree:
            raise EmptyGraphError("No sequence is the destination of an overlap")
        return min(in_degree, key=in_degree.get)

    def layout_path(self) -> List[ReadOverlap]:
        """
        Greedy layout path starting at source_sequence().

        At each step follow the outgoing overlap with the largest length
        whose destination has not been visited; ties go to the edge found
        first. The destination of edge i is the source of edge i + 1.

        Returns:
            List of overlaps, empty if the graph has no edges or the source
            has no unvisited successor
        """
        if not any(self._adjacency.values()):
            return []

        layout: List[ReadOverlap] = []
        visited: Set[str] = set()
        current = self.source_sequence()

        while True:
            visited.add(current)
            best = None
            for edge in self._adjacency[current]:
                if edge.dest_sequence in visited:
                    continue
                if best is None or edge.overlap_length > best.overlap_length:
                    best = edge
            if best is None:
                break
            layout.append(best)
            current = best.dest_sequence

        logger.debug(f"Layout path covers {len(visited)} of {len(self._abundance)} sequences")
        return layout

    def assembly(self) -> str:
        """
        Assemble the sequences along the layout path.

        Raises:
            EmptyAssemblyError: If the layout path has no edges
        """
        layout = self.layout_path()
        if not layout:
            raise EmptyAssemblyError(
                f"Layout path is empty ({len(self._abundance)} distinct sequences, "
                f"min_overlap={self.min_overlap})"
            )

        parts = [layout[0].source_sequence]
        for edge in layout:
            parts.append(edge.dest_sequence[edge.overlap_length:])
        return "".join(parts)

    def __len__(self) -> int:
        return len(self._abundance)

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._abundance

    def __repr__(self) -> str:
        return (f"OverlapGraph(min_overlap={self.min_overlap}, "
                f"sequences={len(self._abundance)}, overlaps={self.stats['overlaps_found']})")

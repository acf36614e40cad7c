"""
Read Simulator for ReadsAnalyzer

Samples fixed-length reads uniformly from a reference sequence and damages
them with random deletions and substitutions. Useful for producing test
inputs for the k-mer table and the overlap graph.

Author: ReadsAnalyzer Development Team
"""

from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional

from ..io.read_io import RawRead

logger = logging.getLogger(__name__)

BASES = ('A', 'C', 'T', 'G')


# ============================================================================
#                           CONFIGURATION
# ============================================================================

@dataclass
class SimulatorConfig:
    """Configuration for simple read simulation."""
    read_length: int = 100  # Read length before indels (bp)
    num_reads: int = 1000  # Number of reads to sample
    substitution_rate: float = 0.0  # Fraction of bases replaced per read
    indel_rate: float = 0.0  # Fraction of bases deleted per read
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.read_length <= 0:
            raise ValueError(f"read_length must be positive, got {self.read_length}")
        if self.num_reads < 0:
            raise ValueError(f"num_reads must be non-negative, got {self.num_reads}")
        for name in ('substitution_rate', 'indel_rate'):
            rate = getattr(self, name)
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"{name} must be between 0 and 1, got {rate}")


# ============================================================================
#                     ERROR INTRODUCTION FUNCTIONS
# ============================================================================

def _num_positions(length: int, rate: float) -> int:
    # round() absorbs float error, e.g. 10 * 0.3 == 3.0000000000000004
    return min(length, math.ceil(round(length * rate, 9)))


def delete_random_positions(rng: random.Random, sequence: str, rate: float) -> str:
    """Delete ceil(len * rate) distinct random positions."""
    count = _num_positions(len(sequence), rate)
    if count == 0:
        return sequence

    deleted = set(rng.sample(range(len(sequence)), count))
    return ''.join(base for i, base in enumerate(sequence) if i not in deleted)


def substitute_random_positions(rng: random.Random, sequence: str, rate: float) -> str:
    """Replace ceil(len * rate) distinct random positions with a different base."""
    count = _num_positions(len(sequence), rate)
    if count == 0:
        return sequence

    seq_list = list(sequence)
    for pos in rng.sample(range(len(seq_list)), count):
        choices = [b for b in BASES if b != seq_list[pos]]
        seq_list[pos] = rng.choice(choices)
    return ''.join(seq_list)


# ============================================================================
#                           SIMULATOR
# ============================================================================

class SimpleReadsSimulator:
    """
    Uniform read sampler with deletion and substitution errors.

    Deletions are applied first, then substitutions, so simulated reads are
    read_length - ceil(read_length * indel_rate) bases long.
    """

    def __init__(self, config: SimulatorConfig):
        self.config = config
        self.rng = random.Random(config.random_seed)

    def expected_read_depth(self, reference_length: int) -> float:
        """Average read depth the simulated reads give over the reference."""
        if reference_length <= 0:
            raise ValueError("Reference length must be positive")
        return self.config.num_reads * self.config.read_length / reference_length

    def simulate(
        self,
        reference_id: str,
        reference: str,
        description: str = ""
    ) -> Iterator[RawRead]:
        """
        Sample reads from a reference sequence.

        Args:
            reference_id: Reference name, used as read name prefix
            reference: Reference sequence
            description: Reference description carried into read headers

        Yields:
            RawRead objects named <reference_id>_<n>
        """
        config = self.config
        reference = reference.upper()
        ref_length = len(reference)

        if ref_length < config.read_length:
            raise ValueError(
                f"Reference {reference_id} ({ref_length}bp) is shorter than "
                f"the read length ({config.read_length}bp)"
            )

        logger.info(f"Length of the sequence to simulate reads: {ref_length:,}")
        logger.info(f"Expected average RD: {self.expected_read_depth(ref_length):.2f}")

        for i in range(config.num_reads):
            start = self.rng.randint(0, ref_length - config.read_length)
            read_seq = reference[start:start + config.read_length]
            read_seq = delete_random_positions(self.rng, read_seq, config.indel_rate)
            read_seq = substitute_random_positions(self.rng, read_seq, config.substitution_rate)

            yield RawRead(
                id=f"{reference_id}_{i + 1}",
                sequence=read_seq,
                description=f"{description} start={start}".strip()
            )

"""
ReadsAnalyzer v0.1.0

Shared read processing interface.

A read processor consumes one read sequence at a time and maintains some
derived structure. Both the k-mer table and the overlap graph implement
this capability; callers feed reads with `process_reads()` and then query
the processor.

Author: ReadsAnalyzer Development Team
License: MIT
"""

import logging
from typing import Iterable, Protocol, Type, Union, runtime_checkable

import numpy as np

from ..io.read_io import RawRead

logger = logging.getLogger(__name__)


@runtime_checkable
class ReadProcessor(Protocol):
    """Anything that can consume a single read sequence."""

    def process_read(self, sequence: str) -> None:
        ...


def check_sequence(sequence) -> str:
    """
    Validate a read sequence before it touches processor state.

    Raises:
        TypeError: If the sequence is None or not a string
    """
    if sequence is None:
        raise TypeError("Read sequence must not be None")
    if not isinstance(sequence, str):
        raise TypeError(f"Read sequence must be a str, got {type(sequence).__name__}")
    return sequence


def process_reads(
    processor: ReadProcessor,
    reads: Iterable[Union[RawRead, str]],
    log_every: int = 100000
) -> int:
    """
    Feed reads, in order, into a processor.

    Args:
        processor: Target read processor
        reads: RawRead objects or plain sequence strings
        log_every: Emit a progress message every this many reads (0 disables)

    Returns:
        Number of reads fed to the processor
    """
    count = 0
    for read in reads:
        sequence = read.sequence if isinstance(read, RawRead) else read
        processor.process_read(sequence)
        count += 1
        if log_every and count % log_every == 0:
            logger.info(f"Processed {count:,} reads")

    logger.debug(f"Fed {count} reads to {type(processor).__name__}")
    return count


def abundance_distribution(
    counts: Iterable[int],
    empty_error: Type[Exception],
    what: str = "items"
) -> np.ndarray:
    """
    Histogram of counts: index c holds how many items have count exactly c.

    Args:
        counts: Non-negative integer counts
        empty_error: Exception type raised when there are no counts
        what: Name of the counted items for the error message

    Returns:
        Integer array of length max(counts) + 1
    """
    values = np.fromiter(counts, dtype=np.int64)
    if values.size == 0:
        raise empty_error(f"No {what} observed; distribution is undefined")
    return np.bincount(values)


__all__ = [
    "ReadProcessor",
    "check_sequence",
    "process_reads",
    "abundance_distribution",
]

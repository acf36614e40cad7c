#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Read I/O for ReadsAnalyzer.

Contains:
- RawRead, the immutable read record handed to the processors
- FASTA and FASTQ readers (Biopython SeqIO, gzip aware)
- FASTA and FASTQ writers used by the read simulator and the CLI
"""

import gzip
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

logger = logging.getLogger(__name__)

FASTA_SUFFIXES = ('.fa', '.fasta', '.fna', '.fas')
FASTQ_SUFFIXES = ('.fq', '.fastq')

# Placeholder quality character for reads without qualities ('5' = Phred 20)
DEFAULT_QUALITY_CHAR = '5'


@dataclass(frozen=True)
class RawRead:
    """
    Sequencing read with identifying metadata.

    Attributes:
        id: Read name
        sequence: Read bases
        description: Free text following the name in the header line
        quality: Quality string (Phred+33), None for FASTA input
    """
    id: str
    sequence: str
    description: str = ""
    quality: Optional[str] = None

    def __len__(self) -> int:
        return len(self.sequence)


# Helper functions for file handling with automatic gzip detection

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """Check if a path names a gzip compressed file."""
    return Path(filepath).suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        Text file handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        if 'r' in mode:
            return gzip.open(filepath, 'rt')
        else:
            return gzip.open(filepath, 'wt')
    else:
        return open(filepath, mode)


def _sequence_format(filepath: Path) -> str:
    """Biopython format name for a path, judged by extension."""
    suffixes = [s.lower() for s in filepath.suffixes]
    if suffixes and suffixes[-1] in ('.gz', '.gzip'):
        suffixes = suffixes[:-1]
    suffix = suffixes[-1] if suffixes else ''

    if suffix in FASTA_SUFFIXES:
        return 'fasta'
    if suffix in FASTQ_SUFFIXES:
        return 'fastq'
    raise ValueError(
        f"Cannot determine sequence format of {filepath}; expected one of "
        f"{', '.join(FASTA_SUFFIXES + FASTQ_SUFFIXES)} (optionally .gz)"
    )


def _record_to_read(record: SeqRecord, with_quality: bool) -> RawRead:
    description = record.description
    if description.startswith(record.id):
        description = description[len(record.id):].strip()

    quality = None
    if with_quality:
        scores = record.letter_annotations.get("phred_quality", [])
        quality = "".join(chr(q + 33) for q in scores) or None

    return RawRead(
        id=record.id,
        sequence=str(record.seq).upper(),
        description=description,
        quality=quality
    )


def _parse(filepath: Union[str, Path], fmt: str) -> Iterator[RawRead]:
    """Check the file up front, then parse it lazily."""
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"{fmt.upper()} file not found: {filepath}")

    return _iter_reads(filepath, fmt)


def _iter_reads(filepath: Path, fmt: str) -> Iterator[RawRead]:
    count = 0
    with open_file(filepath, 'r') as handle:
        for record in SeqIO.parse(handle, fmt):
            yield _record_to_read(record, with_quality=(fmt == 'fastq'))
            count += 1

    logger.info(f"Loaded {count:,} reads from {filepath.name}")


def read_fasta(filepath: Union[str, Path]) -> Iterator[RawRead]:
    """
    Read a FASTA file and yield RawRead objects (without qualities).

    Raises:
        FileNotFoundError: If the file does not exist
    """
    return _parse(filepath, 'fasta')


def read_fastq(filepath: Union[str, Path]) -> Iterator[RawRead]:
    """
    Read a FASTQ file and yield RawRead objects.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    return _parse(filepath, 'fastq')


def read_sequences(filepath: Union[str, Path]) -> Iterator[RawRead]:
    """
    Read FASTA or FASTQ, chosen by file extension.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the extension is not a known sequence format

    Examples:
        >>> for read in read_sequences("reads.fastq.gz"):
        ...     print(read.id, len(read))
    """
    filepath = Path(filepath)
    return _parse(filepath, _sequence_format(filepath))


def write_fasta(
    reads: Iterable[RawRead],
    filepath: Union[str, Path],
    line_width: int = 80
) -> int:
    """
    Write RawRead objects to a FASTA file.

    Args:
        reads: Reads to write
        filepath: Output path (.gz compresses)
        line_width: Number of bases per line (0 = no wrapping)

    Returns:
        Number of sequences written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open_file(filepath, 'w') as handle:
        for read in reads:
            header = f"{read.id} {read.description}".rstrip()
            handle.write(f">{header}\n")

            if line_width > 0:
                for i in range(0, len(read.sequence), line_width):
                    handle.write(read.sequence[i:i + line_width] + '\n')
            else:
                handle.write(read.sequence + '\n')

            count += 1

    return count


def write_fastq(reads: Iterable[RawRead], filepath: Union[str, Path]) -> int:
    """
    Write RawRead objects to a FASTQ file.

    Reads without a quality string get a constant placeholder quality.

    Returns:
        Number of reads written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open_file(filepath, 'w') as handle:
        for read in reads:
            quality = read.quality or DEFAULT_QUALITY_CHAR * len(read.sequence)
            record = SeqRecord(
                seq=Seq(read.sequence),
                id=read.id,
                description=read.description,
                letter_annotations={"phred_quality": [ord(c) - 33 for c in quality]}
            )
            SeqIO.write(record, handle, "fastq")
            count += 1

    return count


def write_reads(reads: Iterable[RawRead], filepath: Union[str, Path]) -> int:
    """Write reads as FASTA or FASTQ, chosen by file extension."""
    filepath = Path(filepath)
    if _sequence_format(filepath) == 'fastq':
        return write_fastq(reads, filepath)
    return write_fasta(reads, filepath)

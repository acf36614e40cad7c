"""
ReadsAnalyzer v0.1.0

I/O module for ReadsAnalyzer.

read_io.py - RawRead record, FASTA/FASTQ reading and writing
"""

from .read_io import (
    RawRead,
    read_fasta,
    read_fastq,
    read_sequences,
    write_fasta,
    write_fastq,
    write_reads,
)

__all__ = [
    "RawRead",
    "read_fasta",
    "read_fastq",
    "read_sequences",
    "write_fasta",
    "write_fastq",
    "write_reads",
]

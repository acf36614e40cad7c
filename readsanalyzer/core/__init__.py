"""
ReadsAnalyzer v0.1.0

Core read processors.

- kmer_table.py - K-mer frequency table
- overlap_graph.py - Overlap graph, greedy layout and assembly
- processor.py - Shared read processing interface
- exceptions.py - Error kinds raised by the processors

Author: ReadsAnalyzer Development Team
License: MIT
"""

from .exceptions import (
    ReadsAnalyzerError,
    UnknownKeyError,
    EmptyTableError,
    EmptyGraphError,
    EmptyAssemblyError,
)
from .processor import ReadProcessor, process_reads, abundance_distribution
from .kmer_table import KmerFrequencyTable
from .overlap_graph import OverlapGraph, ReadOverlap, SourcePolicy, overlap_length

__all__ = [
    # Processors
    "ReadProcessor",
    "KmerFrequencyTable",
    "OverlapGraph",
    "ReadOverlap",
    "SourcePolicy",
    "process_reads",
    "abundance_distribution",
    "overlap_length",

    # Errors
    "ReadsAnalyzerError",
    "UnknownKeyError",
    "EmptyTableError",
    "EmptyGraphError",
    "EmptyAssemblyError",
]

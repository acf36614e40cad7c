#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Package initialization and version metadata.

Author: ReadsAnalyzer Development Team
License: MIT
"""

from .version import __version__
from .core import (
    KmerFrequencyTable,
    OverlapGraph,
    ReadOverlap,
    SourcePolicy,
    process_reads,
)

__all__ = [
    "__version__",
    "KmerFrequencyTable",
    "OverlapGraph",
    "ReadOverlap",
    "SourcePolicy",
    "process_reads",
]

# ReadsAnalyzer v0.1.0
# Any usage is subject to this software's license.

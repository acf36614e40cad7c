#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Pytest configuration and shared fixtures.

Author: ReadsAnalyzer Development Team
License: MIT
"""

import logging
import random
import shutil
import tempfile
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Drop logging handlers installed by CLI invocations during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = before
    root.setLevel(level)


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="readsanalyzer_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def chain_reads():
    """Three reads that overlap by 3 bases in a chain."""
    return ["ACGT", "CGTA", "GTAC"]


@pytest.fixture
def simple_fasta():
    """Generate simple FASTA reads for testing."""
    return ">read1 first\nACGT\n>read2\nCGTA\n>read3\nGTAC\n"


@pytest.fixture
def simple_fastq():
    """Generate simple FASTQ reads for testing."""
    return """@read1
ATCGATCGATCG
+
IIIIIIIIIIII
@read2
GCTAGCTAGCTA
+
IIIIIIIIIIII
"""


@pytest.fixture
def random_genome():
    """Random 1.5 kb genome, reproducible across runs."""
    rng = random.Random(7)
    return ''.join(rng.choice('ACGT') for _ in range(1500))


@pytest.fixture
def tiled_reads(random_genome):
    """Error-free 30 bp reads starting every 5 bp across random_genome."""
    read_length, step = 30, 5
    return [
        random_genome[i:i + read_length]
        for i in range(0, len(random_genome) - read_length + 1, step)
    ]

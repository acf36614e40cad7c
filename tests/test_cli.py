#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Tests for CLI command interface.

Author: ReadsAnalyzer Development Team
License: MIT
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from readsanalyzer.cli import main
from readsanalyzer.io import read_fasta


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        """Test that --help runs without error."""
        result = runner.invoke(main, ['--help'])

        assert result.exit_code == 0
        assert 'ReadsAnalyzer' in result.output

    def test_cli_version(self, runner):
        """Test that --version displays version."""
        result = runner.invoke(main, ['--version'])

        assert result.exit_code == 0
        assert '0.1.0' in result.output

    def test_invalid_command(self, runner):
        """Test that invalid commands are handled gracefully."""
        result = runner.invoke(main, ['nonexistent_command'])

        assert result.exit_code != 0


class TestKmersCommand:
    """Test the kmers command."""

    def test_distribution_output(self, runner, simple_fasta):
        """Test the k-mer abundance distribution report."""
        with runner.isolated_filesystem():
            Path('reads.fasta').write_text(simple_fasta)
            result = runner.invoke(main, ['--quiet', 'kmers', 'reads.fasta', '-k', '3'])

        assert result.exit_code == 0
        assert '# reads\t3' in result.output
        assert '# distinct_kmers\t4' in result.output
        assert '1\t2' in result.output
        assert '2\t2' in result.output

    def test_no_kmers(self, runner, simple_fasta):
        """Test that reads shorter than k give an error."""
        with runner.isolated_filesystem():
            Path('reads.fasta').write_text(simple_fasta)
            result = runner.invoke(main, ['--quiet', 'kmers', 'reads.fasta', '-k', '10'])

        assert result.exit_code == 1
        assert 'No k-mers observed' in result.output

    def test_missing_input(self, runner):
        """Test that a nonexistent input file is rejected."""
        result = runner.invoke(main, ['kmers', 'nonexistent.fasta'])

        assert result.exit_code != 0

    def test_malformed_config(self, runner, simple_fasta):
        """Test that unparsable YAML is reported without a traceback."""
        with runner.isolated_filesystem():
            Path('reads.fasta').write_text(simple_fasta)
            Path('bad.yaml').write_text("kmers: [unclosed\n")
            result = runner.invoke(main, [
                '--quiet', 'kmers', 'reads.fasta', '-k', '3', '-c', 'bad.yaml'
            ])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert 'Error reading configuration' in result.output


class TestOverlapCommand:
    """Test the overlap command."""

    def test_assembly_to_stdout(self, runner, simple_fasta):
        """Test printing the assembly."""
        with runner.isolated_filesystem():
            Path('reads.fasta').write_text(simple_fasta)
            result = runner.invoke(main, ['--quiet', 'overlap', 'reads.fasta', '-m', '3'])

        assert result.exit_code == 0
        assert '# distinct_sequences\t3' in result.output
        assert '# layout_edges\t2' in result.output
        assert 'ACGTAC' in result.output.splitlines()

    def test_assembly_to_file(self, runner, simple_fasta):
        """Test writing the assembly to FASTA."""
        with runner.isolated_filesystem():
            Path('reads.fasta').write_text(simple_fasta)
            result = runner.invoke(main, [
                '--quiet', 'overlap', 'reads.fasta', '-m', '3', '-o', 'assembly.fasta'
            ])
            records = list(read_fasta('assembly.fasta'))

        assert result.exit_code == 0
        assert records[0].sequence == 'ACGTAC'

    def test_source_policy_option(self, runner, simple_fasta):
        """Test selecting the minimum positive in-degree rule."""
        with runner.isolated_filesystem():
            Path('reads.fasta').write_text(simple_fasta)
            result = runner.invoke(main, [
                '--quiet', 'overlap', 'reads.fasta', '-m', '3',
                '--source-policy', 'min_positive_in_degree'
            ])

        assert result.exit_code == 0
        assert 'CGTAC' in result.output.splitlines()

    def test_empty_assembly(self, runner):
        """Test that an unassemblable read set exits with an error."""
        with runner.isolated_filesystem():
            Path('reads.fasta').write_text(">r1\nAAAA\n>r2\nCCCC\n")
            result = runner.invoke(main, ['--quiet', 'overlap', 'reads.fasta', '-m', '3'])

        assert result.exit_code == 1
        assert 'Layout path is empty' in result.output

    def test_min_overlap_from_config(self, runner, simple_fasta):
        """Test that the threshold can come from a configuration file."""
        with runner.isolated_filesystem():
            Path('reads.fasta').write_text(simple_fasta)
            Path('config.yaml').write_text("overlap:\n  min_overlap: 4\n")
            result = runner.invoke(main, [
                '--quiet', 'overlap', 'reads.fasta', '--config', 'config.yaml'
            ])

        # No overlap of 4 bases exists between the reads
        assert result.exit_code == 1


class TestSimulateCommand:
    """Test the simulate command."""

    def test_simulate_fastq(self, runner, random_genome):
        """Test simulating reads into a FASTQ file."""
        with runner.isolated_filesystem():
            Path('genome.fasta').write_text(f">chr1 test\n{random_genome}\n")
            result = runner.invoke(main, [
                '--quiet', 'simulate', 'genome.fasta',
                '-l', '50', '-n', '12', '-o', 'reads.fastq', '--seed', '5'
            ])
            lines = Path('reads.fastq').read_text().splitlines()

        assert result.exit_code == 0
        assert 'Simulated 12 reads' in result.output
        assert len(lines) == 48
        assert lines[0].startswith('@chr1_1')

    def test_reference_too_short(self, runner):
        """Test that a reference shorter than the reads is rejected."""
        with runner.isolated_filesystem():
            Path('genome.fasta').write_text(">chr1\nACGT\n")
            result = runner.invoke(main, [
                '--quiet', 'simulate', 'genome.fasta', '-l', '50', '-n', '1', '-o', 'reads.fa'
            ])

        assert result.exit_code == 1

    def test_empty_reference(self, runner):
        """Test that a reference file without records is rejected."""
        with runner.isolated_filesystem():
            Path('genome.fasta').write_text("")
            result = runner.invoke(main, [
                '--quiet', 'simulate', 'genome.fasta', '-l', '5', '-o', 'reads.fa'
            ])

        assert result.exit_code == 1
        assert 'No sequences found' in result.output


class TestConfigCommands:
    """Test configuration management commands."""

    def test_config_init_and_validate(self, runner):
        """Test generating and validating a configuration file."""
        with runner.isolated_filesystem():
            init = runner.invoke(main, ['config', 'init', '--output', 'test_config.yaml'])
            validate = runner.invoke(main, ['config', 'validate', 'test_config.yaml'])

        assert init.exit_code == 0
        assert validate.exit_code == 0
        assert 'Configuration is valid' in validate.output

    def test_config_validate_reports_errors(self, runner):
        """Test validation of a broken configuration file."""
        with runner.isolated_filesystem():
            Path('bad.yaml').write_text("kmers:\n  k: -1\n")
            result = runner.invoke(main, ['config', 'validate', 'bad.yaml'])

        assert result.exit_code == 1
        assert 'kmers.k' in result.output
        assert 'Configuration validation failed' in result.stderr
        assert 'Configuration validation failed' not in result.stdout

    def test_config_validate_scalar_section(self, runner):
        """Test validation of a section given as a scalar."""
        with runner.isolated_filesystem():
            Path('bad.yaml').write_text("kmers: 31\n")
            result = runner.invoke(main, ['config', 'validate', 'bad.yaml'])

        assert result.exit_code == 1
        assert 'kmers must be a mapping' in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_config_show_defaults(self, runner):
        """Test showing the default configuration."""
        result = runner.invoke(main, ['config', 'show'])

        assert result.exit_code == 0
        assert 'min_overlap' in result.output

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for ReadsAnalyzer.

This module provides the main CLI entry point and the subcommands that
feed read files to the k-mer table and the overlap graph, simulate reads,
and manage configuration files.
"""

import logging
import sys
from pathlib import Path

import click
import yaml

from .version import __version__
from .config.schema import load_config, save_config_template, validate_config
from .core import (
    KmerFrequencyTable,
    OverlapGraph,
    ReadsAnalyzerError,
    SourcePolicy,
    process_reads,
)
from .io import RawRead, read_sequences, write_fasta, write_reads
from .simulation import SimpleReadsSimulator, SimulatorConfig

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    ReadsAnalyzer: k-mer counting and overlap graph assembly of short reads.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


def _load_settings(ctx, config_file):
    """Load and validate configuration, then set up logging."""
    try:
        config = load_config(Path(config_file) if config_file else None)
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("✗ Configuration validation failed:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    obj = ctx.find_root().obj or {}
    if obj.get('VERBOSE'):
        level = logging.DEBUG
    elif obj.get('QUIET'):
        level = logging.ERROR
    else:
        level = getattr(logging, str(config['logging']['level']).upper())

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return config


def _echo_distribution(title, header, distribution, start=0):
    click.echo(f"# {title}")
    click.echo(f"{header}\tcount")
    for index in range(start, len(distribution)):
        click.echo(f"{index}\t{int(distribution[index])}")


# ============================================================================
# Analysis Commands
# ============================================================================

@main.command()
@click.argument('reads_file', type=click.Path(exists=True))
@click.option('--kmer-size', '-k', type=int, default=None,
              help='K-mer length (default: kmers.k from config)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML configuration file')
@click.pass_context
def kmers(ctx, reads_file, kmer_size, config_file):
    """Count k-mers in a FASTA/FASTQ file and report the abundance distribution."""
    config = _load_settings(ctx, config_file)
    k = kmer_size if kmer_size is not None else config['kmers']['k']

    try:
        table = KmerFrequencyTable(k)
        num_reads = process_reads(table, read_sequences(reads_file))
        distribution = table.abundance_distribution()
    except (ReadsAnalyzerError, ValueError) as e:
        click.echo(f"✗ Error counting k-mers: {e}", err=True)
        sys.exit(1)

    logger.info(f"Processed {num_reads:,} reads, {table.stats['kmers_extracted']:,} k-mers extracted")
    click.echo(f"# reads\t{num_reads}")
    click.echo(f"# distinct_kmers\t{len(table)}")
    _echo_distribution("k-mer abundance distribution", "abundance", distribution, start=1)


@main.command()
@click.argument('reads_file', type=click.Path(exists=True))
@click.option('--min-overlap', '-m', type=int, default=None,
              help='Minimum overlap length (default: overlap.min_overlap from config)')
@click.option('--allow-self-loops/--no-self-loops', default=None,
              help='Record the overlap of each sequence with itself')
@click.option('--source-policy', type=click.Choice([p.value for p in SourcePolicy]),
              default=None, help='Rule for choosing the first read of the layout')
@click.option('--output', '-o', type=click.Path(),
              help='Write the assembly to this FASTA file instead of stdout')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML configuration file')
@click.pass_context
def overlap(ctx, reads_file, min_overlap, allow_self_loops, source_policy, output, config_file):
    """Build the overlap graph of a FASTA/FASTQ file and assemble it."""
    config = _load_settings(ctx, config_file)
    settings = config['overlap']

    try:
        graph = OverlapGraph(
            min_overlap if min_overlap is not None else settings['min_overlap'],
            allow_self_loops=(allow_self_loops if allow_self_loops is not None
                              else settings['allow_self_loops']),
            source_policy=SourcePolicy(source_policy or settings['source_policy'])
        )
        num_reads = process_reads(graph, read_sequences(reads_file))

        click.echo(f"# reads\t{num_reads}")
        click.echo(f"# distinct_sequences\t{len(graph)}")
        click.echo(f"# overlaps\t{graph.stats['overlaps_found']}")
        _echo_distribution("sequence abundance distribution", "abundance",
                           graph.abundance_distribution(), start=1)
        _echo_distribution("overlap distribution", "successors",
                           graph.overlap_distribution())

        layout = graph.layout_path()
        click.echo(f"# layout_edges\t{len(layout)}")
        assembly = graph.assembly()
    except (ReadsAnalyzerError, ValueError) as e:
        click.echo(f"✗ Error assembling reads: {e}", err=True)
        sys.exit(1)

    click.echo(f"# assembly_length\t{len(assembly)}")
    record = RawRead(id="assembly", sequence=assembly,
                     description=f"reads={num_reads} layout_edges={len(layout)}")
    if output:
        write_fasta([record], output)
        click.echo(f"✓ Assembly written to: {output}")
    else:
        click.echo(f">{record.id} {record.description}")
        click.echo(assembly)


@main.command()
@click.argument('reference_file', type=click.Path(exists=True))
@click.option('--read-length', '-l', type=int, default=None,
              help='Length of simulated reads (default: simulation.read_length)')
@click.option('--num-reads', '-n', type=int, default=None,
              help='Number of reads to simulate (default: simulation.num_reads)')
@click.option('--output', '-o', required=True, type=click.Path(),
              help='Output FASTA/FASTQ file (format by extension)')
@click.option('--substitution-rate', type=float, default=None,
              help='Fraction of bases substituted per read')
@click.option('--indel-rate', type=float, default=None,
              help='Fraction of bases deleted per read')
@click.option('--seed', type=int, default=None, help='Random seed')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML configuration file')
@click.pass_context
def simulate(ctx, reference_file, read_length, num_reads, output,
             substitution_rate, indel_rate, seed, config_file):
    """Simulate reads from the first sequence of a FASTA file."""
    config = _load_settings(ctx, config_file)
    settings = dict(config['simulation'])
    overrides = {
        'read_length': read_length,
        'num_reads': num_reads,
        'substitution_rate': substitution_rate,
        'indel_rate': indel_rate,
        'random_seed': seed,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})

    try:
        reference = next(iter(read_sequences(reference_file)), None)
        if reference is None:
            raise ValueError(f"No sequences found in file: {reference_file}")

        simulator = SimpleReadsSimulator(SimulatorConfig(**settings))
        reads = simulator.simulate(reference.id, reference.sequence, reference.description)
        written = write_reads(reads, output)
    except ValueError as e:
        click.echo(f"✗ Error simulating reads: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Simulated {written} reads from {reference.id} into {output}")


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='readsanalyzer_config.yaml',
              help='Output configuration file path')
def config_init(output):
    """Generate a configuration file with all available parameters."""
    click.echo(f"Generating configuration template: {output}")

    try:
        save_config_template(Path(output))
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = load_config(Path(config_file))
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:", err=True)
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True), required=False)
def config_show(config_file):
    """Display configuration settings merged over the defaults."""
    try:
        config = load_config(Path(config_file) if config_file else None)
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    click.echo(yaml.dump(config, default_flow_style=False, sort_keys=False))


if __name__ == '__main__':
    main()

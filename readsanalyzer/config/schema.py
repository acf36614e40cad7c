"""
ReadsAnalyzer v0.1.0

Configuration schema for ReadsAnalyzer.

Defines all available configuration parameters with defaults and validation.

Author: ReadsAnalyzer Development Team
License: MIT
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml

from ..core.overlap_graph import SourcePolicy


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # K-mer Counting
    # ========================================================================
    'kmers': {
        'k': 31,
    },

    # ========================================================================
    # Overlap Graph
    # ========================================================================
    'overlap': {
        'min_overlap': 20,
        'allow_self_loops': False,  # Keep the edge a new read forms with itself
        'source_policy': SourcePolicy.ZERO_IN_DEGREE.value,  # 'zero_in_degree', 'min_positive_in_degree'
    },

    # ========================================================================
    # Read Simulation
    # ========================================================================
    'simulation': {
        'read_length': 100,
        'num_reads': 1000,
        'substitution_rate': 0.0,
        'indel_rate': 0.0,
        'random_seed': None,
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'INFO',  # 'DEBUG', 'INFO', 'WARNING', 'ERROR'
    },
}

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Path to YAML config file (None = use defaults)

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config_path is given but does not exist
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path) as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping")

        # Deep merge user config into defaults
        config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path):
    """
    Save the default configuration to a YAML file.

    Args:
        output_path: Output file path
    """
    with open(output_path, 'w') as f:
        yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    sections = {}
    for name in DEFAULT_CONFIG:
        section = config.get(name, {})
        if isinstance(section, dict):
            sections[name] = section
        else:
            errors.append(f"{name} must be a mapping, got {section!r}")
            sections[name] = {}

    k = sections['kmers'].get('k')
    if not _is_positive_int(k):
        errors.append(f"kmers.k must be a positive integer, got {k!r}")

    overlap = sections['overlap']
    min_overlap = overlap.get('min_overlap')
    if not _is_positive_int(min_overlap):
        errors.append(f"overlap.min_overlap must be a positive integer, got {min_overlap!r}")

    policy = overlap.get('source_policy')
    valid_policies = [p.value for p in SourcePolicy]
    if policy not in valid_policies:
        errors.append(f"Invalid overlap.source_policy: {policy!r} (choose from {', '.join(valid_policies)})")

    if not isinstance(overlap.get('allow_self_loops'), bool):
        errors.append("overlap.allow_self_loops must be true or false")

    simulation = sections['simulation']
    if not _is_positive_int(simulation.get('read_length')):
        errors.append(f"simulation.read_length must be a positive integer, got {simulation.get('read_length')!r}")
    num_reads = simulation.get('num_reads')
    if not isinstance(num_reads, int) or isinstance(num_reads, bool) or num_reads < 0:
        errors.append(f"simulation.num_reads must be a non-negative integer, got {num_reads!r}")
    for name in ('substitution_rate', 'indel_rate'):
        rate = simulation.get(name)
        if not isinstance(rate, (int, float)) or isinstance(rate, bool) or not 0.0 <= rate <= 1.0:
            errors.append(f"simulation.{name} must be between 0 and 1, got {rate!r}")

    level = sections['logging'].get('level')
    if str(level).upper() not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging.level: {level!r}")

    return errors

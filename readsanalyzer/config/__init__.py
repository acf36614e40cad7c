"""
ReadsAnalyzer v0.1.0

Configuration management for ReadsAnalyzer.

Author: ReadsAnalyzer Development Team
License: MIT
"""

from .schema import DEFAULT_CONFIG, load_config, save_config_template, validate_config

__all__ = ["DEFAULT_CONFIG", "load_config", "save_config_template", "validate_config"]

#!/usr/bin/env python3
"""
Settings loader for SiteTree.
Supports configuration from sitetree.yml, sitetree.yaml, or sitetree.json files.
"""

import os
import json
import yaml
from typing import Dict, Any, Optional

from .config import MAX_ENTRIES
from .tree import Limits, MAX_CHILDREN, MAX_SPECIAL, MAX_TEMPLATES


class SiteTreeSettings:
    """Load and manage SiteTree configuration settings."""

    # Default configuration
    DEFAULT_SETTINGS = {
        'input': 'content',
        'output': 'public',
        'templates': 'theme',
        'root_url': '',
        'log_dir': 'logs',
        'max_children': MAX_CHILDREN,
        'max_special': MAX_SPECIAL,
        'max_entries': MAX_ENTRIES,
        'max_templates': MAX_TEMPLATES,
    }

    # Config file names to look for (in order of preference)
    CONFIG_FILES = ['sitetree.yml', 'sitetree.yaml', 'sitetree.json']

    def __init__(self, config_dir: str = None):
        """
        Initialize settings loader.

        Args:
            config_dir: Directory to look for config files. Defaults to current directory.
        """
        self.config_dir = config_dir or os.getcwd()
        self.settings = self.DEFAULT_SETTINGS.copy()
        self.config_file_path = None

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings from configuration file if it exists.

        Returns:
            Dictionary of configuration settings
        """
        config_file = self._find_config_file()

        if config_file:
            self.config_file_path = config_file
            try:
                loaded_settings = self._load_config_file(config_file)
                if loaded_settings:
                    unknown = sorted(set(loaded_settings) - set(self.DEFAULT_SETTINGS))
                    if unknown:
                        print(f"Warning: Ignoring unknown settings in {config_file}: {', '.join(unknown)}")
                    self.settings.update({k: v for k, v in loaded_settings.items()
                                          if k in self.DEFAULT_SETTINGS})
                    print(f"Loaded configuration from: {os.path.relpath(config_file)}")
            except (ValueError, IOError, OSError) as e:
                print(f"Warning: Failed to load config file {config_file}: {e}")

        return self.settings.copy()

    def _find_config_file(self) -> Optional[str]:
        """
        Find the first available configuration file.

        Returns:
            Path to config file or None if not found
        """
        for filename in self.CONFIG_FILES:
            config_path = os.path.join(self.config_dir, filename)
            if os.path.exists(config_path):
                return config_path
        return None

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Dictionary of configuration settings
        """
        file_ext = os.path.splitext(config_path)[1].lower()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if file_ext in ['.yml', '.yaml']:
                    loaded = yaml.safe_load(f) or {}
                elif file_ext == '.json':
                    loaded = json.load(f) or {}
                else:
                    raise ValueError(f"Unsupported config file format: {file_ext}")
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        except PermissionError:
            raise PermissionError(f"Permission denied reading configuration file: {config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file {config_path}: {e}")

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {config_path} must contain a mapping")
        return loaded

    def create_sample_config(self, file_format: str = 'yml') -> str:
        """
        Create a sample configuration file.

        Args:
            file_format: Format for config file ('yml', 'yaml', or 'json')

        Returns:
            Path to created sample config file
        """
        filename = f'sitetree.{file_format}'
        config_path = os.path.join(self.config_dir, filename)

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                if file_format in ['yml', 'yaml']:
                    # Custom YAML output with comments
                    f.write("# SiteTree Configuration File\n\n")
                    f.write("# Directories\n")
                    f.write("input: content\n")
                    f.write("output: public\n")
                    f.write("templates: theme\n\n")
                    f.write("# Prefix for every generated link, e.g. https://example.com\n")
                    f.write("root_url: ''\n\n")
                    f.write("# Build logs, set to null to disable\n")
                    f.write("log_dir: logs\n\n")
                    f.write("# Capacity limits\n")
                    f.write(f"max_children: {MAX_CHILDREN}\n")
                    f.write(f"max_special: {MAX_SPECIAL}\n")
                    f.write(f"max_entries: {MAX_ENTRIES}\n")
                    f.write(f"max_templates: {MAX_TEMPLATES}\n")
                elif file_format == 'json':
                    json.dump(self.DEFAULT_SETTINGS, f, indent=2)
                else:
                    raise ValueError(f"Unsupported config file format: {file_format}")
        except PermissionError:
            raise PermissionError(f"Permission denied creating configuration file: {config_path}")
        except (IOError, OSError) as e:
            raise IOError(f"Error writing configuration file {config_path}: {e}")

        return config_path

    def merge_with_args(self, args_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge configuration settings with command-line arguments.
        Command-line arguments take precedence over config file settings.

        Args:
            args_dict: Dictionary of command-line arguments

        Returns:
            Merged configuration dictionary
        """
        merged = self.settings.copy()

        # Override with non-None command line arguments
        for key, value in args_dict.items():
            if value is not None and key in self.DEFAULT_SETTINGS:
                merged[key] = value

        return merged

    @staticmethod
    def limits_from(settings: Dict[str, Any]) -> Limits:
        """Build the capacity limits from merged settings."""
        return Limits(
            max_children=int(settings['max_children']),
            max_special=int(settings['max_special']),
            max_entries=int(settings['max_entries']),
            max_templates=int(settings['max_templates']),
        )

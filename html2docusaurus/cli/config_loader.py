"""YAML conversion-config loading and saving.

A config file holds the same options as ConversionConfig, written with
snake_case keys:

    title: "Getting Started"
    sidebar_position: 2
    tags:
      - setup
    convert_tabs: false

Command-line flags override values read from the file.
"""

import os

import yaml

from html2docusaurus.errors import ConfigError
from html2docusaurus.models import ConversionConfig


class ConfigLoader:
    """Loads and saves ConversionConfig YAML files."""

    @classmethod
    def load(cls, config_path: str) -> ConversionConfig:
        """Load a conversion config from a YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            ConversionConfig built from the file

        Raises:
            ConfigError: If the file cannot be read or holds an invalid config
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {config_path}")
        except PermissionError:
            raise ConfigError(f"Permission denied reading {config_path}")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            raise ConfigError("Configuration file is empty")

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return ConversionConfig.from_dict(config_dict)

    @classmethod
    def to_yaml_dict(cls, config: ConversionConfig) -> dict:
        """Return the snake_case mapping written to config files."""
        return {
            'title': config.title,
            'description': config.description,
            'sidebar_position': config.sidebar_position,
            'sidebar_label': config.sidebar_label,
            'slug': config.slug,
            'tags': list(config.tags),
            'keywords': list(config.keywords),
            'add_frontmatter': config.add_frontmatter,
            'convert_tabs': config.convert_tabs,
            'convert_admonitions': config.convert_admonitions,
            'convert_code_blocks': config.convert_code_blocks,
            'process_images': config.process_images,
            'custom_frontmatter': config.custom_frontmatter,
        }

    @classmethod
    def save(cls, config_path: str, config: ConversionConfig) -> None:
        """Write a conversion config to a YAML file.

        Raises:
            ConfigError: If the file cannot be written
        """
        yaml_str = yaml.safe_dump(
            cls.to_yaml_dict(config),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        config_dir = os.path.dirname(config_path)
        try:
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)
            with open(config_path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except OSError as e:
            raise ConfigError(f"Cannot write {config_path}: {e}")

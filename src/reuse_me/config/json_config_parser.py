# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

import json
import logging
from dataclasses import fields, replace
from typing import Any

from reuse_me.adaptors.os import open_file
from reuse_me.config.cli_configs import Config, default_config


class JsonConfigParser:
    """Parser for JSON configuration files used by reuse-me."""

    @staticmethod
    def parse_config(
        config_dict: dict[str, Any], base_config: Config = default_config
    ) -> Config:
        """Apply the values of a JSON object on top of a base configuration.

        JSON format: {"preset_excluded_paths": ["vendor/**"], "companion_suffix": ".license"}

        Args:
            config_dict: Dictionary whose keys are Config field names
            base_config: Configuration providing the values not present in config_dict

        Returns:
            A new Config object, base_config is left untouched

        Raises:
            ValueError: If a key is not a Config field or a value has the wrong type
        """
        if not isinstance(config_dict, dict):
            raise ValueError("Configuration must be a JSON object.")

        known_fields = {field.name: field for field in fields(Config)}
        overrides: dict[str, Any] = {}
        for key, value in config_dict.items():
            if key not in known_fields:
                raise ValueError(
                    f"Unknown configuration key: {key}. Valid keys: {sorted(known_fields)}"
                )
            expected_type = type(getattr(base_config, key))
            if not isinstance(value, expected_type):
                raise ValueError(
                    f"Invalid value for {key}: expected {expected_type.__name__}, got {type(value).__name__}"
                )
            if expected_type is list and not all(isinstance(v, str) for v in value):
                raise ValueError(f"Invalid value for {key}: expected a list of strings")
            overrides[key] = value

        return replace(base_config, **overrides)

    @staticmethod
    def load_config(config_file_path: str) -> Config:
        """Load a configuration from a JSON file.

        Args:
            config_file_path: Path to the JSON file containing configuration overrides

        Returns:
            The default configuration with the file values applied

        Raises:
            FileNotFoundError: If the configuration file is not found
            json.JSONDecodeError: If the JSON file is invalid
            ValueError: If the configuration format is invalid
        """
        try:
            config_json = json.loads(open_file(config_file_path))
            return JsonConfigParser.parse_config(config_json)
        except FileNotFoundError:
            logging.error(f"Configuration file not found: {config_file_path}")
            raise
        except json.JSONDecodeError:
            logging.error(f"Invalid JSON in configuration file: {config_file_path}")
            raise
        except Exception as e:
            logging.error(f"Failed to load configuration: {str(e)}")
            raise

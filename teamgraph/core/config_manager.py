"""
Configuration Management

Loads the teamgraph configuration from a YAML file, applies environment
variable overrides (optionally read from a .env file) and validates the
result against a JSON schema.
"""

import os
import codecs
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "default.yaml"

DUPLICATE_POLICIES = ("first", "merge")
OUTPUT_FORMATS = ("text", "json")


@dataclass
class InputConfig:
    """Roster input configuration."""
    path: str = "nba.csv"
    name_column: str = "PLAYER"
    group_column: str = "TEAM_pie"
    encoding: str = "utf-8"
    strip_whitespace: bool = True


@dataclass
class GraphConstructionConfig:
    """Configuration for graph construction."""
    duplicate_policy: str = "merge"
    edge_label: str = "teammate"


@dataclass
class CentralityConfig:
    """Configuration for closeness centrality."""
    scale_by_reachable: bool = False


@dataclass
class OutputConfig:
    """Configuration for result presentation."""
    format: str = "text"
    top_k: int = 0
    precision: int = 6

    def __post_init__(self):
        # the schema's "integer" type also admits integral floats such as 2.0
        self.top_k = int(self.top_k)
        self.precision = int(self.precision)


@dataclass
class SystemConfig:
    """System-level configuration."""
    log_level: str = "WARNING"
    environment: str = "development"


CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "input": {
            "type": "object",
            "properties": {
                "path": {"type": "string"},
                "name_column": {"type": "string", "minLength": 1},
                "group_column": {"type": "string", "minLength": 1},
                "encoding": {"type": "string", "minLength": 1},
                "strip_whitespace": {"type": "boolean"}
            },
            "additionalProperties": False
        },
        "graph_construction": {
            "type": "object",
            "properties": {
                "duplicate_policy": {"enum": list(DUPLICATE_POLICIES)},
                "edge_label": {"type": "string", "minLength": 1}
            },
            "additionalProperties": False
        },
        "centrality": {
            "type": "object",
            "properties": {
                "scale_by_reachable": {"type": "boolean"}
            },
            "additionalProperties": False
        },
        "output": {
            "type": "object",
            "properties": {
                "format": {"enum": list(OUTPUT_FORMATS)},
                "top_k": {"type": "integer", "minimum": 0},
                "precision": {"type": "integer", "minimum": 0, "maximum": 17}
            },
            "additionalProperties": False
        },
        "system": {
            "type": "object",
            "properties": {
                "log_level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
                "environment": {"type": "string"}
            },
            "additionalProperties": False
        }
    },
    "additionalProperties": False
}


class ConfigurationManager:
    """
    Configuration manager for teamgraph.

    Precedence, lowest to highest: dataclass defaults, YAML file,
    environment variables.
    """

    SECTIONS = ("input", "graph_construction", "centrality", "output", "system")

    ENV_MAPPINGS = {
        'TEAMGRAPH_INPUT_PATH': ('input', 'path'),
        'TEAMGRAPH_NAME_COLUMN': ('input', 'name_column'),
        'TEAMGRAPH_GROUP_COLUMN': ('input', 'group_column'),
        'TEAMGRAPH_INPUT_ENCODING': ('input', 'encoding'),
        'TEAMGRAPH_STRIP_WHITESPACE': ('input', 'strip_whitespace'),
        'TEAMGRAPH_DUPLICATE_POLICY': ('graph_construction', 'duplicate_policy'),
        'TEAMGRAPH_EDGE_LABEL': ('graph_construction', 'edge_label'),
        'TEAMGRAPH_SCALE_BY_REACHABLE': ('centrality', 'scale_by_reachable'),
        'TEAMGRAPH_OUTPUT_FORMAT': ('output', 'format'),
        'TEAMGRAPH_TOP_K': ('output', 'top_k'),
        'TEAMGRAPH_PRECISION': ('output', 'precision'),
        'TEAMGRAPH_LOG_LEVEL': ('system', 'log_level'),
        'TEAMGRAPH_ENVIRONMENT': ('system', 'environment'),
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None, load_env_file: bool = True):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.config_data: Dict[str, Any] = {}
        self.environment_vars: Dict[str, str] = {}

        self.input: InputConfig = InputConfig()
        self.graph_construction: GraphConstructionConfig = GraphConstructionConfig()
        self.centrality: CentralityConfig = CentralityConfig()
        self.output: OutputConfig = OutputConfig()
        self.system: SystemConfig = SystemConfig()

        if load_env_file:
            load_dotenv()

        self._load_config()
        self._load_environment_variables()
        self.validate_config_with_schema()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            if self.config_path != DEFAULT_CONFIG_PATH:
                raise ConfigurationError(f"Configuration file not found: {self.config_path}")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse configuration {self.config_path}: {e}")

        if not isinstance(self.config_data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {self.config_path}")

        try:
            jsonschema.validate(self.config_data, CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e.message}")

        self._populate_config_objects()

    def _populate_config_objects(self) -> None:
        """Populate configuration objects from loaded data."""
        if 'input' in self.config_data:
            self.input = InputConfig(**self.config_data['input'])

        if 'graph_construction' in self.config_data:
            self.graph_construction = GraphConstructionConfig(**self.config_data['graph_construction'])

        if 'centrality' in self.config_data:
            self.centrality = CentralityConfig(**self.config_data['centrality'])

        if 'output' in self.config_data:
            self.output = OutputConfig(**self.config_data['output'])

        if 'system' in self.config_data:
            self.system = SystemConfig(**self.config_data['system'])

    def _load_environment_variables(self) -> None:
        """Load configuration overrides from environment variables."""
        for env_var, (section, key) in self.ENV_MAPPINGS.items():
            value = os.environ.get(env_var)
            if value is not None:
                self.environment_vars[env_var] = value

                config_obj = getattr(self, section)
                target_type = type(getattr(config_obj, key))
                setattr(config_obj, key, self._convert_type(env_var, value, target_type))

    def _convert_type(self, env_var: str, value: str, target_type: type) -> Any:
        """Convert string value to target type."""
        if target_type == bool:
            return value.lower() in ('true', '1', 'yes', 'on')
        elif target_type == int:
            try:
                return int(value)
            except ValueError:
                raise ConfigurationError(f"{env_var} must be an integer, got '{value}'")
        else:
            return value

    def to_dict(self) -> Dict[str, Any]:
        """Return the effective configuration as nested dictionaries."""
        return {section: asdict(getattr(self, section)) for section in self.SECTIONS}

    def validate_config_with_schema(self) -> None:
        """Validate the effective configuration against the JSON schema."""
        try:
            jsonschema.validate(self.to_dict(), CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e.message}")

        try:
            codecs.lookup(self.input.encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown input encoding: '{self.input.encoding}'")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key using dot notation."""
        keys = key.split('.')
        if keys[0] not in self.SECTIONS:
            return default

        obj = getattr(self, keys[0])
        for part in keys[1:]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj


def validate_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Validate a configuration file and report the effective settings."""
    try:
        config = ConfigurationManager(config_path)
        return {"status": "valid", "errors": [], "config": config.to_dict()}
    except ConfigurationError as e:
        return {"status": "invalid", "errors": [str(e)], "config": {}}

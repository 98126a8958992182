# ============================================================================
# KubeNotify - Configuration Management
#
# Purpose: Load and manage configuration from YAML and env vars
# Inputs: YAML files, environment variables
# Outputs: Config model with all settings
# Dependencies: pyyaml, pydantic, pathlib
# Usage: config = Config.from_default() or Config.from_yaml("path.yaml")
#
# Changelog:
#   2026-10-05: Initial configuration system
#   2026-10-08: Added AWSSigningConfig (region, role_arn) for signed requests
#   2026-10-11: Env overrides resolved against model fields instead of YAML keys,
#               so sections missing from the file can still be overridden
#   2026-10-20: logging.level validated; input mapping deep-copied before overrides
# ============================================================================

import copy
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Type

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from KubeNotify.errors import ConfigurationError

ENV_PREFIX = "KUBENOTIFY_"


class SettingsConfig(BaseModel):
    """General settings."""

    cluster_name: str = "not-configured"


class AWSSigningConfig(BaseModel):
    """AWS SigV4 request signing (AWS OpenSearch Service)."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    aws_region: Optional[str] = None  # Falls back to the boto3 session region
    role_arn: Optional[str] = None  # Assume this role via STS when set


class IndexConfig(BaseModel):
    """Index naming and shape. Shards/replicas apply only when the index is created."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="kubenotify", min_length=1)
    type: str = Field(default="_doc", min_length=1)  # Custom types need a pre-7.x cluster
    shards: int = Field(default=1, ge=1)
    replicas: int = Field(default=0, ge=0)


class ElasticSearchConfig(BaseModel):
    """Elasticsearch/OpenSearch notifier configuration."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    server: str = Field(default="http://localhost:9200", min_length=1)
    username: str = ""
    password: str = ""
    aws_signing: AWSSigningConfig = Field(default_factory=AWSSigningConfig)
    index: IndexConfig = Field(default_factory=IndexConfig)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class Config(BaseModel):
    """Root configuration object."""

    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    elasticsearch: ElasticSearchConfig = Field(default_factory=ElasticSearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Config":
        """
        Build a Config from a plain mapping, applying environment overrides.

        Raises:
            ConfigurationError: If the data does not validate
        """
        data = cls._apply_env_overrides(copy.deepcopy(data or {}))
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration", details=str(e)) from e

    @classmethod
    def from_yaml(cls, path: str) -> "Config":
        """
        Load configuration from a YAML file with environment variable overrides.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If YAML is invalid or values fail validation
        """
        yaml_path = Path(path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(yaml_path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Config file is not valid YAML: {path}", details=str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_default(cls) -> "Config":
        """
        Load configuration from default config file.

        Returns:
            Config instance
        """
        package_root = Path(__file__).parent.parent.parent
        default_config = package_root / "configs" / "default.yaml"

        if default_config.exists():
            return cls.from_yaml(str(default_config))
        return cls.from_dict({})

    @classmethod
    def _apply_env_overrides(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration.

        Environment variables follow the pattern:
        KUBENOTIFY_<SECTION>_<KEY>=value, with one more level for nested
        sections. Field names may contain underscores (e.g. aws_signing,
        cluster_name), so names are matched against the model fields,
        longest first, rather than split on ``_``.

        Examples:
            KUBENOTIFY_SETTINGS_CLUSTER_NAME=prod            → data["settings"]["cluster_name"]
            KUBENOTIFY_ELASTICSEARCH_AWS_SIGNING_ENABLED=1   → data["elasticsearch"]["aws_signing"]["enabled"]

        Values are left as strings; pydantic coerces them to the field type.

        Args:
            data: Configuration dictionary

        Returns:
            Updated configuration dictionary
        """
        for env_key, env_value in sorted(os.environ.items()):
            if not env_key.startswith(ENV_PREFIX):
                continue
            remainder = env_key[len(ENV_PREFIX) :].lower()
            path = _resolve_field_path(cls, remainder)
            if path is None:
                continue
            _set_path(data, path, env_value)
        return data


def _resolve_field_path(model: Type[BaseModel], name: str) -> Optional[list]:
    """Map ``aws_signing_role_arn`` style names onto a path of model field names."""
    for field_name in sorted(model.model_fields, key=len, reverse=True):
        annotation = model.model_fields[field_name].annotation
        is_section = isinstance(annotation, type) and issubclass(annotation, BaseModel)
        if name == field_name and not is_section:
            return [field_name]
        if is_section and name.startswith(field_name + "_"):
            rest = _resolve_field_path(annotation, name[len(field_name) + 1 :])
            if rest is not None:
                return [field_name] + rest
    return None


def _set_path(data: Dict[str, Any], path: list, value: Any) -> None:
    node = data
    for key in path[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[path[-1]] = value

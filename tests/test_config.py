# ============================================================================
# KubeNotify - Configuration Tests
#
# Purpose: Test YAML loading, defaults, validation and env overrides
# Inputs: Temporary YAML files, monkeypatched environment
# Outputs: Test pass/fail
# Dependencies: pytest, KubeNotify
# Usage: pytest tests/test_config.py -v
#
# Changelog:
#   2026-10-05: Initial config tests
#   2026-10-11: Env overrides for sections absent from the YAML file
#   2026-10-20: logging.level validation, caller mapping left untouched
# ============================================================================

import pytest

from KubeNotify.config import Config
from KubeNotify.errors import ConfigurationError

FULL_YAML = """
settings:
  cluster_name: prod-eu-1
elasticsearch:
  enabled: true
  server: https://search.example.com
  username: elastic
  password: s3cret
  aws_signing:
    enabled: false
  index:
    name: k8sevents
    type: botkube-event
    shards: 3
    replicas: 1
"""


def _write(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return str(path)


class TestConfigLoading:
    """Tests for Config.from_yaml / from_dict / from_default."""

    def test_defaults(self):
        config = Config()

        assert config.settings.cluster_name == "not-configured"
        assert config.elasticsearch.enabled is False
        assert config.elasticsearch.aws_signing.enabled is False
        assert config.elasticsearch.index.shards == 1
        assert config.elasticsearch.index.replicas == 0
        assert config.logging.level == "INFO"

    def test_from_yaml(self, tmp_path):
        config = Config.from_yaml(_write(tmp_path, FULL_YAML))

        es = config.elasticsearch
        assert config.settings.cluster_name == "prod-eu-1"
        assert es.enabled is True
        assert es.server == "https://search.example.com"
        assert (es.username, es.password) == ("elastic", "s3cret")
        assert es.index.name == "k8sevents"
        assert es.index.type == "botkube-event"
        assert (es.index.shards, es.index.replicas) == (3, 1)

    def test_empty_yaml_gives_defaults(self, tmp_path):
        config = Config.from_yaml(_write(tmp_path, ""))

        assert config == Config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(str(tmp_path / "nope.yaml"))

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Config.from_yaml(_write(tmp_path, "elasticsearch: [unclosed"))

    def test_non_mapping_yaml(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Config.from_yaml(_write(tmp_path, "- just\n- a list\n"))

    def test_from_default(self):
        config = Config.from_default()

        assert config.elasticsearch.index.name == "kubenotify"


class TestConfigValidation:
    """Invalid values surface as ConfigurationError."""

    @pytest.mark.parametrize(
        "index",
        [
            {"shards": 0},
            {"replicas": -1},
            {"name": ""},
            {"shards": "many"},
        ],
    )
    def test_invalid_index_shape(self, index):
        with pytest.raises(ConfigurationError) as exc_info:
            Config.from_dict({"elasticsearch": {"index": index}})

        assert "Invalid configuration" in str(exc_info.value)

    def test_invalid_logging_level(self):
        with pytest.raises(ConfigurationError):
            Config.from_dict({"logging": {"level": "verbose"}})

    def test_logging_level_case_insensitive(self):
        assert Config.from_dict({"logging": {"level": "debug"}}).logging.level == "DEBUG"

    def test_default_document_kind_is_typeless(self):
        assert Config().elasticsearch.index.type == "_doc"

    def test_elasticsearch_section_is_immutable(self):
        config = Config()

        with pytest.raises(Exception):
            config.elasticsearch.index.shards = 9


class TestEnvOverrides:
    """KUBENOTIFY_<SECTION>_<KEY> environment overrides."""

    def test_top_level_field(self, tmp_path, monkeypatch):
        monkeypatch.setenv("KUBENOTIFY_SETTINGS_CLUSTER_NAME", "from-env")

        config = Config.from_yaml(_write(tmp_path, FULL_YAML))

        assert config.settings.cluster_name == "from-env"

    def test_nested_field(self, tmp_path, monkeypatch):
        monkeypatch.setenv("KUBENOTIFY_ELASTICSEARCH_INDEX_SHARDS", "5")
        monkeypatch.setenv("KUBENOTIFY_ELASTICSEARCH_AWS_SIGNING_ENABLED", "true")
        monkeypatch.setenv("KUBENOTIFY_ELASTICSEARCH_AWS_SIGNING_ROLE_ARN", "arn:aws:iam::1:role/es")

        config = Config.from_yaml(_write(tmp_path, FULL_YAML))

        assert config.elasticsearch.index.shards == 5
        assert config.elasticsearch.aws_signing.enabled is True
        assert config.elasticsearch.aws_signing.role_arn == "arn:aws:iam::1:role/es"

    def test_section_missing_from_yaml(self, monkeypatch):
        monkeypatch.setenv("KUBENOTIFY_ELASTICSEARCH_PASSWORD", "123456")

        config = Config.from_dict({})

        assert config.elasticsearch.password == "123456"

    def test_caller_mapping_not_mutated(self, monkeypatch):
        monkeypatch.setenv("KUBENOTIFY_ELASTICSEARCH_INDEX_SHARDS", "7")
        data = {"elasticsearch": {"index": {"name": "k8sevents", "shards": 2}}}

        config = Config.from_dict(data)

        assert config.elasticsearch.index.shards == 7
        assert data == {"elasticsearch": {"index": {"name": "k8sevents", "shards": 2}}}

    def test_unknown_keys_ignored(self, monkeypatch):
        monkeypatch.setenv("KUBENOTIFY_ELASTICSEARCH_NOPE", "x")
        monkeypatch.setenv("KUBENOTIFY_ELASTICSEARCH_INDEX", "not-a-section-value")

        config = Config.from_dict({})

        assert config.elasticsearch.index.name == "kubenotify"

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("KUBENOTIFY_ELASTICSEARCH_INDEX_REPLICAS", "-3")

        with pytest.raises(ConfigurationError):
            Config.from_dict({})

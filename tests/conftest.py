# ============================================================================
# KubeNotify - Test Configuration and Fixtures
#
# Purpose: Shared pytest fixtures for testing
# Inputs: None
# Outputs: Fixtures for use in tests
# Dependencies: pytest, KubeNotify
# Usage: pytest tests/ (fixtures are automatically available)
#
# Changelog:
#   2026-10-06: Initial recording store and event fixtures
# ============================================================================

import os
from datetime import datetime
from typing import Any, Dict, List, Optional, Set, Tuple

import pytest

from KubeNotify.events import Event, EventType, Level
from KubeNotify.notify.elasticsearch import ElasticSearchNotifier
from KubeNotify.utils.time import FixedClock


class RecordingStore:
    """
    In-memory DocumentStore that records every request in order.

    ``fail_on`` maps an operation name ("exists", "create", "index", "flush")
    to the exception that operation should raise.
    """

    def __init__(self, existing: Optional[Set[str]] = None, fail_on: Optional[Dict[str, Exception]] = None):
        self.indices: Set[str] = set(existing or ())
        self.fail_on = dict(fail_on or {})
        self.calls: List[Tuple[str, str]] = []
        self.create_bodies: List[Dict[str, Any]] = []
        self.documents: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, op: str, index: str) -> None:
        self.calls.append((op, index))
        if op in self.fail_on:
            raise self.fail_on[op]

    def ops(self) -> List[str]:
        return [op for op, _ in self.calls]

    def index_exists(self, index: str) -> bool:
        self._record("exists", index)
        return index in self.indices

    def create_index(self, index: str, body: Dict[str, Any]) -> bool:
        self._record("create", index)
        self.create_bodies.append(body)
        if index in self.indices:
            return False
        self.indices.add(index)
        return True

    def index_document(self, index: str, doc_type: str, document: Dict[str, Any]) -> Any:
        self._record("index", index)
        self.documents.append((index, doc_type, document))
        return {"result": "created"}

    def flush(self, index: str) -> Any:
        self._record("flush", index)
        return {"_shards": {"failed": 0}}


@pytest.fixture(autouse=True)
def _clear_kubenotify_env(monkeypatch):
    """Keep KUBENOTIFY_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("KUBENOTIFY_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fixed_clock():
    return FixedClock(datetime(2024, 3, 7, 14, 30, 0))


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def make_notifier(fixed_clock):
    """Factory for notifiers wired to a RecordingStore and a fixed clock."""

    def _make(store: RecordingStore, **overrides: Any) -> ElasticSearchNotifier:
        kwargs: Dict[str, Any] = {
            "index": "k8sevents",
            "doc_type": "kubenotify-event",
            "shards": 3,
            "replicas": 1,
            "cluster_name": "prod-eu-1",
            "clock": fixed_clock,
        }
        kwargs.update(overrides)
        return ElasticSearchNotifier(store=store, **kwargs)

    return _make


@pytest.fixture
def pod_event():
    return Event(
        title="Pod created",
        kind="Pod",
        name="nginx-7c5ddbdf54-x2k9p",
        namespace="default",
        type=EventType.CREATE,
        level=Level.INFO,
        cluster="laptop",
        messages=["Pod nginx-7c5ddbdf54-x2k9p created"],
        timestamp=datetime(2024, 3, 7, 14, 29, 58),
    )


@pytest.fixture
def make_store():
    """Factory for RecordingStore instances with pre-existing indices or failures."""
    return RecordingStore

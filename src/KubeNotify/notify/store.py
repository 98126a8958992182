# ============================================================================
# KubeNotify - Document Store
#
# Purpose: Minimal document-store interface used by notifiers, plus the
#          opensearch-py implementation (Elasticsearch / OpenSearch / AWS)
# Inputs: Index names, JSON-compatible documents
# Outputs: HTTP requests to the search backend
# Dependencies: opensearch-py, requests, notify.auth
# Usage: store = OpenSearchStore.from_config(config.elasticsearch)
#
# Changelog:
#   2026-10-06: Initial DocumentStore protocol and OpenSearchStore
#   2026-10-08: Signed mode (SigV4 over RequestsHttpConnection, https forced)
#   2026-10-10: create_index treats resource_already_exists_exception as success
#   2026-10-20: Typed write path built locally instead of via client internals
# ============================================================================

from typing import Any, Dict, Protocol
from urllib.parse import quote, urlsplit, urlunsplit

from opensearchpy import OpenSearch, RequestsHttpConnection
from opensearchpy.exceptions import RequestError

from KubeNotify.config import ElasticSearchConfig
from KubeNotify.logging_utils import get_logger
from KubeNotify.notify.auth import AuthMode, SignedAuth, resolve_auth_mode

logger = get_logger(__name__)

# Mapping-type name used by typeless (7.x+) clusters
DEFAULT_DOC_TYPE = "_doc"

ALREADY_EXISTS = "resource_already_exists_exception"


class DocumentStore(Protocol):
    """The four backend operations a partitioned event sink needs."""

    def index_exists(self, index: str) -> bool: ...

    def create_index(self, index: str, body: Dict[str, Any]) -> bool: ...

    def index_document(self, index: str, doc_type: str, document: Dict[str, Any]) -> Any: ...

    def flush(self, index: str) -> Any: ...


class OpenSearchStore:
    """DocumentStore backed by an ``opensearchpy.OpenSearch`` client."""

    def __init__(self, client: OpenSearch):
        self.client = client

    @classmethod
    def from_config(cls, config: ElasticSearchConfig) -> "OpenSearchStore":
        """Build a store with the auth mode selected by ``config``."""
        return cls(build_client(config.server, resolve_auth_mode(config)))

    def index_exists(self, index: str) -> bool:
        return bool(self.client.indices.exists(index=index))

    def create_index(self, index: str, body: Dict[str, Any]) -> bool:
        """
        Create ``index`` with ``body``.

        Returns:
            True if this call created the index, False if it already existed
        """
        try:
            self.client.indices.create(index=index, body=body)
        except RequestError as e:
            if e.error == ALREADY_EXISTS:
                logger.debug(f"Index {index} was created concurrently")
                return False
            raise
        return True

    def index_document(self, index: str, doc_type: str, document: Dict[str, Any]) -> Any:
        if not doc_type or doc_type == DEFAULT_DOC_TYPE:
            return self.client.index(index=index, body=document)
        # Custom mapping types (pre-7.x clusters) are not exposed by client.index()
        return self.client.transport.perform_request("POST", typed_document_path(index, doc_type), body=document)

    def flush(self, index: str) -> Any:
        return self.client.indices.flush(index=index)


def build_client(server: str, auth: AuthMode, session: Any = None) -> OpenSearch:
    """
    Create an OpenSearch client for ``server``.

    Both modes disable sniffing. Basic mode enables HTTP compression,
    signed mode disables it.

    Args:
        server: Backend URL
        auth: Resolved auth mode
        session: Optional boto3 session for signed mode

    Returns:
        Configured OpenSearch client
    """
    if isinstance(auth, SignedAuth):
        return OpenSearch(
            hosts=[force_https(server)],
            http_auth=auth.http_auth(session),
            connection_class=RequestsHttpConnection,
            sniff_on_start=False,
            sniff_on_connection_fail=False,
            http_compress=False,
        )

    return OpenSearch(
        hosts=[server],
        http_auth=auth.http_auth(),
        sniff_on_start=False,
        sniff_on_connection_fail=False,
        http_compress=True,
    )


def typed_document_path(index: str, doc_type: str) -> str:
    """URL path for a typed write, e.g. ``/k8sevents-07-03-2024/kubenotify-event``."""
    return f"/{quote(index, safe='')}/{quote(doc_type, safe='')}"


def force_https(server: str) -> str:
    """Rewrite ``server`` to use the https scheme."""
    parts = urlsplit(server if "://" in server else f"https://{server}")
    return urlunsplit(("https",) + tuple(parts[1:]))


def index_settings_body(shards: int, replicas: int) -> Dict[str, Any]:
    """Create-index body carrying the partition shape."""
    return {"settings": {"index": {"number_of_shards": shards, "number_of_replicas": replicas}}}

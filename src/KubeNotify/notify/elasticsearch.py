# ============================================================================
# KubeNotify - Elasticsearch Notifier
#
# Purpose: Index cluster events into a date-partitioned Elasticsearch/OpenSearch
#          index, creating the day's index on first use
# Inputs: Event objects
# Outputs: exists -> create (if absent) -> index -> flush requests
# Dependencies: base, store, auth, utils.time, utils.serialization
# Usage: notifier = ElasticSearchNotifier.from_config(config); notifier.send_event(event)
#
# Changelog:
#   2026-10-06: Initial ElasticSearchNotifier
#   2026-10-08: Store and clock are injected; from_config builds the real client
#   2026-10-09: Index name computed once per send_event so a call spanning
#               midnight addresses a single index
#   2026-10-20: send_event returns the index it wrote to
# ============================================================================

from datetime import datetime
from typing import Optional

from KubeNotify.config import Config
from KubeNotify.errors import (
    ConfigurationError,
    ConstructionError,
    CreateIndexError,
    ExistenceCheckError,
    FlushError,
    WriteError,
)
from KubeNotify.events import Event
from KubeNotify.logging_utils import get_logger
from KubeNotify.notify.base import Notifier
from KubeNotify.notify.store import DocumentStore, OpenSearchStore, index_settings_body
from KubeNotify.utils.serialization import event_to_document
from KubeNotify.utils.time import Clock, format_index_suffix, local_now

logger = get_logger(__name__)


def partition_index_name(base: str, moment: datetime) -> str:
    """Date-partitioned index name, e.g. ``k8sevents-07-03-2024``."""
    return f"{base}-{format_index_suffix(moment)}"


class ElasticSearchNotifier(Notifier):
    """
    Notifier that writes each event into ``<index>-<DD-MM-YYYY>``.

    Per event:
        1. cluster name on the (copied) event is replaced with ``cluster_name``
        2. the day's index is checked and, if absent, created with the
           configured shard/replica counts
        3. the event is indexed under ``doc_type`` and the index flushed

    Every step is single-attempt. The first failure is logged and raised;
    an index created earlier in the same call is left in place.
    """

    def __init__(
        self,
        store: DocumentStore,
        index: str,
        doc_type: str,
        shards: int,
        replicas: int,
        cluster_name: str,
        *,
        clock: Clock = local_now,
    ):
        """
        Initialize Elasticsearch notifier.

        Args:
            store: Document store client (shared, thread-safe)
            index: Base index name; the call date is appended
            doc_type: Document kind label the event is indexed under
            shards: Shard count applied when the index is created
            replicas: Replica count applied when the index is created
            cluster_name: Cluster label stamped on every event
            clock: Source of "now" for index naming
        """
        self.store = store
        self.index = index
        self.doc_type = doc_type
        self.shards = shards
        self.replicas = replicas
        self.cluster_name = cluster_name
        self.clock = clock
        logger.info(f"ElasticSearchNotifier initialized: index={self.index}-*, type={self.doc_type}")

    @classmethod
    def from_config(
        cls,
        config: Config,
        store: Optional[DocumentStore] = None,
        *,
        clock: Clock = local_now,
    ) -> "ElasticSearchNotifier":
        """
        Build a notifier from configuration.

        Args:
            config: Root configuration
            store: Pre-built store; an OpenSearchStore is created from config otherwise
            clock: Source of "now" for index naming

        Raises:
            ConfigurationError: If the elasticsearch notifier is disabled
            ConstructionError: If credentials, signing or the client cannot be set up
        """
        es = config.elasticsearch
        if not es.enabled:
            raise ConfigurationError("Elasticsearch notifier is not enabled (elasticsearch.enabled=false)")

        if store is None:
            try:
                store = OpenSearchStore.from_config(es)
            except Exception as e:
                logger.error(f"Failed to create Elasticsearch client for {es.server}. Error: {e}")
                raise ConstructionError(f"Failed to create Elasticsearch client for {es.server}", details=str(e)) from e

        return cls(
            store=store,
            index=es.index.name,
            doc_type=es.index.type,
            shards=es.index.shards,
            replicas=es.index.replicas,
            cluster_name=config.settings.cluster_name,
            clock=clock,
        )

    def index_name(self) -> str:
        """Index the next event would be written to."""
        return partition_index_name(self.index, self.clock())

    def send_event(self, event: Event) -> str:
        """
        Index an event into the day's partition.

        Returns:
            Name of the index the event was written to

        Raises:
            ExistenceCheckError: If the index existence check fails
            CreateIndexError: If the missing index cannot be created
            WriteError: If the event cannot be indexed
            FlushError: If the index cannot be flushed
        """
        logger.debug(f">> Sending to ElasticSearch: {event!r}")

        event = event.model_copy(update={"cluster": self.cluster_name})
        index = self.index_name()

        try:
            exists = self.store.index_exists(index)
        except Exception as e:
            logger.error(f"Failed to get index {index}. Error: {e}")
            raise ExistenceCheckError(f"Failed to get index {index}", details=str(e), index=index) from e

        if not exists:
            try:
                created = self.store.create_index(index, index_settings_body(self.shards, self.replicas))
            except Exception as e:
                logger.error(f"Failed to create index {index}. Error: {e}")
                raise CreateIndexError(f"Failed to create index {index}", details=str(e), index=index) from e
            if created:
                logger.info(f"Created index {index} (shards={self.shards}, replicas={self.replicas})")

        try:
            self.store.index_document(index, self.doc_type, event_to_document(event))
        except Exception as e:
            logger.error(f"Failed to post data to index {index}. Error: {e}")
            raise WriteError(f"Failed to post data to index {index}", details=str(e), index=index) from e

        try:
            self.store.flush(index)
        except Exception as e:
            logger.error(f"Failed to flush index {index}. Error: {e}")
            raise FlushError(f"Failed to flush index {index}", details=str(e), index=index) from e

        logger.debug(f"Event successfully sent to ElasticSearch index {index}")
        return index

    def send_message(self, text: str) -> None:
        """Free-text messages are not indexed; this is a no-op."""
        return None

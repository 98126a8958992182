# ============================================================================
# KubeNotify - Notify Package
#
# Purpose: Notifier backends for cluster events
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from KubeNotify.notify import Notifier, ElasticSearchNotifier
#
# Changelog:
#   2026-10-06: Initial notify package
# ============================================================================

from KubeNotify.notify.auth import AuthMode, BasicAuth, SignedAuth, resolve_auth_mode
from KubeNotify.notify.base import Notifier
from KubeNotify.notify.elasticsearch import ElasticSearchNotifier
from KubeNotify.notify.store import DocumentStore, OpenSearchStore

__all__ = [
    "Notifier",
    "ElasticSearchNotifier",
    "DocumentStore",
    "OpenSearchStore",
    "AuthMode",
    "BasicAuth",
    "SignedAuth",
    "resolve_auth_mode",
]

# ============================================================================
# KubeNotify - Package Initialization
#
# Purpose: Package-level exports and version information
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from KubeNotify import __version__
#
# Changelog:
#   2026-10-05: Initial package setup
# ============================================================================

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from KubeNotify.config import Config
from KubeNotify.events import Event
from KubeNotify.notify.base import Notifier
from KubeNotify.notify.elasticsearch import ElasticSearchNotifier

__all__ = [
    "__version__",
    "Config",
    "Event",
    "Notifier",
    "ElasticSearchNotifier",
]

# ============================================================================
# KubeNotify - Utils Package
#
# Purpose: Shared utility functions
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from KubeNotify.utils import event_to_document, format_index_suffix
#
# Changelog:
#   2026-10-05: Initial utils package
# ============================================================================

from KubeNotify.utils.serialization import event_to_document
from KubeNotify.utils.time import format_index_suffix, local_now

__all__ = ["event_to_document", "format_index_suffix", "local_now"]

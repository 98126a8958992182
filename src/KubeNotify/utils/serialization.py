# ============================================================================
# KubeNotify - Serialization Utilities
#
# Purpose: Convert Event objects to/from JSON-ready data
# Inputs: Event objects, JSON strings
# Outputs: dicts, Event objects
# Dependencies: json, pydantic
# Usage: body = event_to_document(event)
#
# Changelog:
#   2026-10-05: Initial serialization
#   2026-10-20: Documents keep null fields
# ============================================================================

import json
from typing import Any, Dict

from KubeNotify.events import Event


def event_to_document(event: Event) -> Dict[str, Any]:
    """
    Convert an Event into the JSON-compatible document stored by the backend.

    Every field is kept, including nulls; datetimes become ISO-8601 strings.
    """
    return event.model_dump(mode="json")


def deserialize_event_from_json(json_str: str) -> Event:
    """
    Deserialize an Event from a JSON string.

    Args:
        json_str: JSON object string

    Returns:
        Event object
    """
    data = json.loads(json_str)
    return Event(**data)

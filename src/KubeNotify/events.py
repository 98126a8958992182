# ============================================================================
# KubeNotify - Event Schema
#
# Purpose: Pydantic model for cluster events handed to notifiers
# Inputs: None (schema definitions)
# Outputs: Type-safe event models
# Dependencies: pydantic
# Usage: event = Event(kind="Pod", name="nginx", namespace="default", type=EventType.CREATE)
#
# Changelog:
#   2026-10-05: Initial event schema
#   2026-10-09: Allow extra fields so watchers can attach resource-specific data
#               without a schema change; notifiers only touch `cluster`
#   2026-10-20: type/level accept values outside the enums; null kind,
#               name, namespace and list fields pass through unchanged
# ============================================================================

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    """Kind of change observed on a resource."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    ERROR = "error"
    WARNING = "warning"
    NORMAL = "normal"
    INFO = "info"
    ALL = "all"


class Level(str, Enum):
    """Notification severity."""

    INFO = "info"
    WARN = "warn"
    DEBUG = "debug"
    ERROR = "error"
    CRITICAL = "critical"


class Event(BaseModel):
    """
    A cluster event as delivered to notifiers.

    The record is opaque to notifiers with one exception: ``cluster`` is
    overwritten with the notifier's configured cluster name before the
    event leaves the process. Unknown fields are preserved and serialized.
    """

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    code: Optional[str] = None
    title: Optional[str] = None
    kind: Optional[str] = ""
    name: Optional[str] = ""
    namespace: Optional[str] = ""
    messages: Optional[List[str]] = Field(default_factory=list)
    # Known values are normalized; anything else is forwarded as-is
    type: Optional[Union[EventType, str]] = None
    reason: Optional[str] = None
    error: Optional[str] = None
    level: Optional[Union[Level, str]] = Level.INFO
    cluster: str = ""
    channel: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    count: int = 0
    action: Optional[str] = None
    skip: bool = False
    resource: Optional[str] = None
    recommendations: Optional[List[str]] = Field(default_factory=list)
    warnings: Optional[List[str]] = Field(default_factory=list)

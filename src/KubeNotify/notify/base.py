# ============================================================================
# KubeNotify - Base Notifier Interface
#
# Purpose: Abstract base class for event notifiers
# Inputs: Event objects, free-text messages
# Outputs: Location identifier for events; raises NotifierError subclasses on failure
# Dependencies: abc, events
# Usage: class MyNotifier(Notifier): ...
#
# Changelog:
#   2026-10-05: Initial Notifier interface
#   2026-10-20: send_event returns where the event was delivered
# ============================================================================

from abc import ABC, abstractmethod

from KubeNotify.events import Event


class Notifier(ABC):
    """
    Abstract base class for notifiers.

    Notifiers deliver cluster events (and, where the backend supports it,
    free-text messages) to an external system.
    """

    @abstractmethod
    def send_event(self, event: Event) -> str:
        """
        Deliver a structured event.

        Args:
            event: Event to deliver

        Returns:
            Location identifier (index name, channel, etc.)

        Raises:
            NotifierError: If delivery fails
        """
        pass

    @abstractmethod
    def send_message(self, text: str) -> None:
        """
        Deliver a free-text message.

        Args:
            text: Message body

        Raises:
            NotifierError: If delivery fails
        """
        pass

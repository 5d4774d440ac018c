"""Form lifecycle events and a minimal priority-ordered dispatcher."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Tuple, Union

from ulid import ULID

from customer_family.forms import Form

logger = logging.getLogger("customer_family.events")

FORM_AFTER_BUILD: str = "form.after_build"


def form_after_build_event(form_name: str) -> str:
    """Name of the event fired once ``form_name`` has built its own fields."""
    return f"{FORM_AFTER_BUILD}.{form_name}"


class FormBuiltEvent:
    """Event carrying the form whose builder listeners may extend."""

    def __init__(self, form: Form) -> None:
        self.event_id = str(ULID())
        self._form = form

    def get_form(self) -> Form:
        return self._form

    def __repr__(self) -> str:
        return f"FormBuiltEvent(event_id={self.event_id[:8]}..., form={self._form.name!r})"


# Either a method name (priority 0) or a (method name, priority) pair.
SubscriptionSpec = Union[str, Tuple[str, int]]

Listener = Callable[[Any], None]


class EventSubscriber(ABC):
    """An object declaring which events it handles, and with which method."""

    @abstractmethod
    def get_subscribed_events(self) -> Dict[str, SubscriptionSpec]:
        """Map event names to a method name or a (method name, priority) pair."""


class EventDispatcher:
    """Calls listeners by descending priority, registration order among equals."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Tuple[int, int, Listener]]] = {}
        self._sequence = 0

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        self._sequence += 1
        self._listeners.setdefault(event_name, []).append(
            (priority, self._sequence, listener)
        )

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        for event_name, spec in subscriber.get_subscribed_events().items():
            if isinstance(spec, str):
                method_name, priority = spec, 0
            else:
                method_name, priority = spec
            self.add_listener(event_name, getattr(subscriber, method_name), priority)

    def get_listeners(self, event_name: str) -> List[Listener]:
        ordered = sorted(
            self._listeners.get(event_name, []),
            key=lambda entry: (-entry[0], entry[1]),
        )
        return [listener for _, _, listener in ordered]

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))

    def dispatch(self, event_name: str, event: Any) -> Any:
        """Deliver ``event`` to every listener of ``event_name`` and return it.

        Listener exceptions propagate to the caller; later listeners do not run.
        """
        for listener in self.get_listeners(event_name):
            logger.debug("Dispatching %s to %r", event_name, listener)
            listener(event)
        return event

"""Read-only access to the submitted payload of the current request."""
from abc import ABC, abstractmethod
from collections import abc
from typing import Any, Dict, Mapping, Optional

# Raw field values as posted by the client; a client may post an explicit null.
SubmittedFormData = Mapping[str, Optional[str]]


class RequestAccessor(ABC):
    """Accessor over the POST body of the request being handled."""

    @abstractmethod
    def get_submitted_form(self, form_name: str) -> Optional[SubmittedFormData]:
        """Return the submitted fields of ``form_name``, or None if not posted."""

    def get_submitted_value(self, form_name: str, field_name: str) -> Optional[str]:
        """Return one raw submitted value, or None if absent."""
        form = self.get_submitted_form(form_name)
        if form is None:
            return None
        return form.get(field_name)


class InMemoryRequest(RequestAccessor):
    """Request accessor over an already-decoded POST body.

    The body is keyed by form name, each entry mapping field names to raw
    strings, the way form payloads are posted (``form_name[field]=value``).
    Entries that are not mappings are treated as not submitted.
    """

    def __init__(self, body: Optional[Mapping[str, Any]] = None) -> None:
        self._body: Dict[str, Any] = dict(body or {})

    def get_submitted_form(self, form_name: str) -> Optional[SubmittedFormData]:
        form = self._body.get(form_name)
        if not isinstance(form, abc.Mapping):
            return None
        return form

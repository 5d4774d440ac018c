"""Shared pytest fixtures for all tests."""
from typing import Any, Callable, Dict, Optional

import pytest

from customer_family import (
    CUSTOMER_FAMILY_PARTICULAR,
    CUSTOMER_FAMILY_PROFESSIONAL,
    THELIA_CUSTOMER_CREATE_FORM_NAME,
    CustomerFamily,
    CustomerFamilyFormListener,
    Form,
    FormBuiltEvent,
    InMemoryCustomerFamilyCatalog,
    InMemoryRequest,
    MessageCatalogTranslator,
)


@pytest.fixture
def families() -> list[CustomerFamily]:
    return [
        CustomerFamily(code=CUSTOMER_FAMILY_PARTICULAR, title="Particular"),
        CustomerFamily(code=CUSTOMER_FAMILY_PROFESSIONAL, title="Professional"),
    ]


@pytest.fixture
def catalog(families: list[CustomerFamily]) -> InMemoryCustomerFamilyCatalog:
    return InMemoryCustomerFamilyCatalog(families)


@pytest.fixture
def translator() -> MessageCatalogTranslator:
    return MessageCatalogTranslator()


@pytest.fixture
def make_request() -> Callable[..., InMemoryRequest]:
    """Build a request whose POST body holds the customer creation form.

    Pass ``None`` to post no form at all.
    """

    def _make(fields: Optional[Dict[str, Any]] = None) -> InMemoryRequest:
        if fields is None:
            return InMemoryRequest()
        return InMemoryRequest({THELIA_CUSTOMER_CREATE_FORM_NAME: fields})

    return _make


@pytest.fixture
def make_listener(
    catalog: InMemoryCustomerFamilyCatalog,
    translator: MessageCatalogTranslator,
    make_request: Callable[..., InMemoryRequest],
) -> Callable[..., CustomerFamilyFormListener]:
    def _make(fields: Optional[Dict[str, Any]] = None) -> CustomerFamilyFormListener:
        return CustomerFamilyFormListener(make_request(fields), catalog, translator)

    return _make


@pytest.fixture
def built_form() -> Callable[[CustomerFamilyFormListener], Form]:
    """Run a listener's build callback against a fresh customer creation form."""

    def _build(listener: CustomerFamilyFormListener) -> Form:
        form = Form(THELIA_CUSTOMER_CREATE_FORM_NAME)
        listener.add_customer_family_fields(FormBuiltEvent(form))
        return form

    return _build

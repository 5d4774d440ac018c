"""
customer-family-form: customer family fields for the customer creation form.

Hooks into the "after build" event of the customer creation form, appends a
customer family selector plus SIRET and VAT fields, and validates them
against the family catalog.

Example:
    >>> from customer_family import (
    ...     CustomerFamily, CustomerFamilyFormListener, EventDispatcher, Form,
    ...     FormBuiltEvent, InMemoryCustomerFamilyCatalog, InMemoryRequest,
    ...     MessageCatalogTranslator, form_after_build_event,
    ... )
    >>> catalog = InMemoryCustomerFamilyCatalog(
    ...     [CustomerFamily(code="PARTICULAR", title="Particular")]
    ... )
    >>> listener = CustomerFamilyFormListener(
    ...     InMemoryRequest(), catalog, MessageCatalogTranslator()
    ... )
    >>> dispatcher = EventDispatcher()
    >>> dispatcher.add_subscriber(listener)
    >>> form = Form("thelia_customer_create")
    >>> _ = dispatcher.dispatch(
    ...     form_after_build_event(form.name), FormBuiltEvent(form)
    ... )
    >>> [field.name for field in form.get_form_builder().fields]
    ['customer_family_code', 'siret', 'vat']
"""

__version__ = "1.0.0"

# Core data models
from customer_family.models import (
    CUSTOMER_FAMILY_PARTICULAR,
    CUSTOMER_FAMILY_PROFESSIONAL,
    CustomerFamily,
    CustomerFamilyError,
    DataSourceError,
    FamilyCode,
    FormBuildError,
    Violation,
)

# Family catalog
from customer_family.catalog import (
    CustomerFamilyCatalog,
    InMemoryCustomerFamilyCatalog,
)

# Translation
from customer_family.translation import (
    MESSAGE_DOMAIN,
    MessageCatalogTranslator,
    Translator,
)

# Request access
from customer_family.request import (
    InMemoryRequest,
    RequestAccessor,
    SubmittedFormData,
)

# Form building and validation
from customer_family.forms import (
    FieldType,
    Form,
    FormBuilder,
    FormFieldSpec,
    NotBlank,
    ValidationContext,
    ValidationRule,
    validate_submission,
)

# Events
from customer_family.events import (
    FORM_AFTER_BUILD,
    EventDispatcher,
    EventSubscriber,
    FormBuiltEvent,
    form_after_build_event,
)

# Configuration
from customer_family.config import (
    DEFAULT_PRIORITY,
    THELIA_CUSTOMER_CREATE_FORM_NAME,
    ListenerSettings,
)

# Listener
from customer_family.listener import (
    CUSTOMER_FAMILY_CODE_FIELD_NAME,
    CUSTOMER_FAMILY_SIRET_FIELD_NAME,
    CUSTOMER_FAMILY_VAT_FIELD_NAME,
    CustomerFamilyFormListener,
    FamilyCodeIsKnown,
    ParticularInfoRequiredWhenProfessional,
)

__all__ = [
    "__version__",
    # Models
    "CUSTOMER_FAMILY_PARTICULAR",
    "CUSTOMER_FAMILY_PROFESSIONAL",
    "CustomerFamily",
    "FamilyCode",
    "Violation",
    # Exceptions
    "CustomerFamilyError",
    "DataSourceError",
    "FormBuildError",
    # Catalog
    "CustomerFamilyCatalog",
    "InMemoryCustomerFamilyCatalog",
    # Translation
    "MESSAGE_DOMAIN",
    "MessageCatalogTranslator",
    "Translator",
    # Request
    "InMemoryRequest",
    "RequestAccessor",
    "SubmittedFormData",
    # Forms
    "FieldType",
    "Form",
    "FormBuilder",
    "FormFieldSpec",
    "NotBlank",
    "ValidationContext",
    "ValidationRule",
    "validate_submission",
    # Events
    "FORM_AFTER_BUILD",
    "EventDispatcher",
    "EventSubscriber",
    "FormBuiltEvent",
    "form_after_build_event",
    # Configuration
    "DEFAULT_PRIORITY",
    "THELIA_CUSTOMER_CREATE_FORM_NAME",
    "ListenerSettings",
    # Listener
    "CUSTOMER_FAMILY_CODE_FIELD_NAME",
    "CUSTOMER_FAMILY_SIRET_FIELD_NAME",
    "CUSTOMER_FAMILY_VAT_FIELD_NAME",
    "CustomerFamilyFormListener",
    "FamilyCodeIsKnown",
    "ParticularInfoRequiredWhenProfessional",
]

"""Customer family extension of the customer creation form.

Once the customer creation form has built its own fields, this listener
appends three unmapped fields to it:

* ``customer_family_code``: the family the new customer belongs to,
  picked among the catalog's families;
* ``siret`` and ``vat``: company identifiers, mandatory only when the
  selected family is the professional one.
"""
import logging
from typing import Dict, List, Mapping, Optional

from customer_family.catalog import CustomerFamilyCatalog
from customer_family.config import THELIA_CUSTOMER_CREATE_FORM_NAME, ListenerSettings
from customer_family.events import (
    EventSubscriber,
    FormBuiltEvent,
    SubscriptionSpec,
    form_after_build_event,
)
from customer_family.forms import FieldType, NotBlank, ValidationContext, ValidationRule
from customer_family.models import (
    CUSTOMER_FAMILY_PARTICULAR,
    CUSTOMER_FAMILY_PROFESSIONAL,
    Violation,
)
from customer_family.request import RequestAccessor
from customer_family.translation import Translator

logger = logging.getLogger("customer_family.listener")

CUSTOMER_FAMILY_CODE_FIELD_NAME: str = "customer_family_code"
CUSTOMER_FAMILY_SIRET_FIELD_NAME: str = "siret"
CUSTOMER_FAMILY_VAT_FIELD_NAME: str = "vat"

INVALID_FAMILY_MESSAGE: str = "The customer family is not valid"
EMPTY_FIELD_MESSAGE: str = "This field can't be empty"
NOT_BLANK_MESSAGE: str = "This value should not be blank."


class FamilyCodeIsKnown(ValidationRule):
    """The submitted code must match a family of the catalog."""

    def __init__(self, catalog: CustomerFamilyCatalog, translator: Translator, domain: str) -> None:
        self._catalog = catalog
        self._translator = translator
        self._domain = domain

    def evaluate(self, value: Optional[str], context: ValidationContext) -> List[Violation]:
        code = "" if value is None else value
        if self._catalog.count_by_code(code) == 0:
            return [
                context.violation(
                    self._translator.translate(INVALID_FAMILY_MESSAGE, domain=self._domain)
                )
            ]
        return []

    def __repr__(self) -> str:
        return "FamilyCodeIsKnown()"


class ParticularInfoRequiredWhenProfessional(ValidationRule):
    """SIRET and VAT must both be filled in when the family is professional.

    The rule reads the whole submitted form rather than the value it is
    given, so each field it is attached to reports a blank in *either*
    field. With the rule on both ``siret`` and ``vat``, one blank field
    yields one violation on each of them.
    """

    def __init__(
        self,
        request: RequestAccessor,
        translator: Translator,
        form_name: str,
        domain: str,
    ) -> None:
        self._request = request
        self._translator = translator
        self._form_name = form_name
        self._domain = domain

    def evaluate(self, value: Optional[str], context: ValidationContext) -> List[Violation]:
        form = self._request.get_submitted_form(self._form_name)

        if form is None or CUSTOMER_FAMILY_CODE_FIELD_NAME not in form:
            logger.debug(
                "Skipping professional information check on %s: no family submitted",
                context.field_name,
            )
            return []

        family_code = form[CUSTOMER_FAMILY_CODE_FIELD_NAME]

        if family_code == CUSTOMER_FAMILY_PARTICULAR:
            return []

        if family_code == CUSTOMER_FAMILY_PROFESSIONAL:
            blank_fields = [
                _is_blank(form, CUSTOMER_FAMILY_SIRET_FIELD_NAME),
                _is_blank(form, CUSTOMER_FAMILY_VAT_FIELD_NAME),
            ]
            if any(blank_fields):
                return [
                    context.violation(
                        self._translator.translate(EMPTY_FIELD_MESSAGE, domain=self._domain)
                    )
                ]

        return []

    def __repr__(self) -> str:
        return "ParticularInfoRequiredWhenProfessional()"


def _is_blank(form: Mapping[str, Optional[str]], field_name: str) -> bool:
    # Non-string scalars from a decoded JSON body are measured as text.
    value = form.get(field_name)
    return value is None or len(str(value)) == 0


class CustomerFamilyFormListener(EventSubscriber):
    """Adds the customer family fields to the customer creation form."""

    THELIA_CUSTOMER_CREATE_FORM_NAME = THELIA_CUSTOMER_CREATE_FORM_NAME

    def __init__(
        self,
        request: RequestAccessor,
        catalog: CustomerFamilyCatalog,
        translator: Translator,
        settings: Optional[ListenerSettings] = None,
    ) -> None:
        self.request = request
        self.catalog = catalog
        self.translator = translator
        self.settings = settings if settings is not None else ListenerSettings()

    def get_subscribed_events(self) -> Dict[str, SubscriptionSpec]:
        return {
            form_after_build_event(self.settings.form_name): (
                "add_customer_family_fields",
                self.settings.priority,
            ),
        }

    def add_customer_family_fields(self, event: FormBuiltEvent) -> None:
        """Append the family, SIRET and VAT fields to the event's form.

        Raises:
            DataSourceError: If the family catalog cannot be read.
        """
        choices: Dict[str, str] = {}
        for family in self.catalog.find_all():
            choices[family.code] = self._trans(family.title)

        professional_info = ParticularInfoRequiredWhenProfessional(
            self.request, self.translator, self.settings.form_name, self.settings.message_domain
        )

        event.get_form().get_form_builder().add(
            CUSTOMER_FAMILY_CODE_FIELD_NAME,
            FieldType.CHOICE,
            constraints=[
                FamilyCodeIsKnown(self.catalog, self.translator, self.settings.message_domain),
                NotBlank(self._trans(NOT_BLANK_MESSAGE)),
            ],
            choices=choices,
            empty_data=False,
            required=False,
            label=self._trans("Customer family"),
            label_attr={"for": "customer_family_id"},
            mapped=False,
        ).add(
            CUSTOMER_FAMILY_SIRET_FIELD_NAME,
            FieldType.TEXT,
            constraints=[professional_info],
            required=False,
            empty_data=False,
            label=self._trans("Siret number"),
            label_attr={"for": "siret"},
            mapped=False,
        ).add(
            CUSTOMER_FAMILY_VAT_FIELD_NAME,
            FieldType.TEXT,
            constraints=[professional_info],
            required=False,
            empty_data=False,
            label=self._trans("Vat"),
            label_attr={"for": "vat"},
            mapped=False,
        )

        logger.debug(
            "Extended form %s with %d customer family choice(s) (event %s)",
            event.get_form().name,
            len(choices),
            event.event_id,
        )

    def _trans(self, message_id: str) -> str:
        return self.translator.translate(message_id, None, self.settings.message_domain)

"""Form schema building and field-level validation contracts.

A ``FormBuilder`` collects ``FormFieldSpec`` entries in insertion order.
Each spec carries its own ``ValidationRule`` list; the host validation
pipeline (``validate_submission`` here) runs them against the submitted
payload and gathers the resulting violations.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from customer_family.models import FormBuildError, Violation
from customer_family.request import RequestAccessor

logger = logging.getLogger("customer_family.forms")


class FieldType(str, Enum):
    """Form controls the extension knows how to declare."""

    CHOICE = "choice"
    TEXT = "text"


@dataclass(frozen=True)
class ValidationContext:
    """Where a rule is being evaluated: which form, which field."""

    form_name: str
    field_name: str

    def violation(self, message: str) -> Violation:
        """Build a violation against the field under validation."""
        return Violation(field=self.field_name, message=message)


class ValidationRule(ABC):
    """A predicate over a submitted value that may report violations."""

    @abstractmethod
    def evaluate(self, value: Optional[str], context: ValidationContext) -> List[Violation]:
        """Return the violations for ``value`` (empty when valid)."""


class NotBlank(ValidationRule):
    """Reject missing, null and zero-length values."""

    def __init__(self, message: str = "This value should not be blank.") -> None:
        self.message = message

    def evaluate(self, value: Optional[str], context: ValidationContext) -> List[Violation]:
        if value is None or value == "":
            return [context.violation(self.message)]
        return []

    def __repr__(self) -> str:
        return "NotBlank()"


class FormFieldSpec(BaseModel):
    """One field appended to a form schema."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Field name, part of the wire contract")
    field_type: FieldType = Field(..., description="Control type")
    required: bool = Field(True, description="Framework-level required flag")
    empty_data: Any = Field(
        None,
        description="Value handed to the model when the field is submitted empty",
    )
    label: Optional[str] = Field(None, description="Translated label")
    label_attr: Dict[str, str] = Field(
        default_factory=dict, description="HTML attributes of the label element"
    )
    mapped: bool = Field(
        True, description="Whether the value is bound to the underlying entity"
    )
    choices: Dict[str, str] = Field(
        default_factory=dict,
        description="Ordered value -> label mapping (choice fields only)",
    )
    constraints: Tuple[ValidationRule, ...] = Field(
        default=(), description="Rules evaluated in order on submission"
    )


class FormBuilder:
    """Ordered, mutable collection of field specs."""

    def __init__(self, form_name: str) -> None:
        self.form_name = form_name
        self._fields: Dict[str, FormFieldSpec] = {}

    def add(
        self,
        name: str,
        field_type: Union[FieldType, str] = FieldType.TEXT,
        *,
        constraints: Sequence[ValidationRule] = (),
        **options: Any,
    ) -> "FormBuilder":
        """Append a field and return the builder for chaining.

        Raises:
            FormBuildError: If a field with this name already exists, or an
                option is unknown or invalid.
        """
        if name in self._fields:
            raise FormBuildError(
                f"Form {self.form_name!r} already has a field named {name!r}"
            )
        try:
            spec = FormFieldSpec(
                name=name,
                field_type=FieldType(field_type),
                constraints=tuple(constraints),
                **options,
            )
        except PydanticValidationError as e:
            raise FormBuildError(
                f"Invalid options for field {name!r} of form {self.form_name!r}: {e}"
            ) from e
        self._fields[name] = spec
        logger.debug("Added field %s (%s) to form %s", name, spec.field_type.value, self.form_name)
        return self

    def has(self, name: str) -> bool:
        return name in self._fields

    def get(self, name: str) -> FormFieldSpec:
        try:
            return self._fields[name]
        except KeyError:
            raise FormBuildError(
                f"Form {self.form_name!r} has no field named {name!r}"
            ) from None

    @property
    def fields(self) -> Tuple[FormFieldSpec, ...]:
        return tuple(self._fields.values())


class Form:
    """A named form and the builder holding its schema."""

    def __init__(self, name: str, builder: Optional[FormBuilder] = None) -> None:
        self.name = name
        self._builder = builder if builder is not None else FormBuilder(name)

    def get_form_builder(self) -> FormBuilder:
        return self._builder

    def __repr__(self) -> str:
        return f"Form(name={self.name!r}, fields={len(self._builder.fields)})"


def validate_submission(form: Form, request: RequestAccessor) -> List[Violation]:
    """Run every field's rules against the submitted payload of ``form``.

    Fields are visited in schema order and rules in declaration order.
    A field missing from the payload is validated as None.
    """
    violations: List[Violation] = []
    for spec in form.get_form_builder().fields:
        value = request.get_submitted_value(form.name, spec.name)
        context = ValidationContext(form_name=form.name, field_name=spec.name)
        for rule in spec.constraints:
            violations.extend(rule.evaluate(value, context))
    logger.debug(
        "Validated form %s: %d violation(s)", form.name, len(violations)
    )
    return violations

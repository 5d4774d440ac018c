"""Core data models for the customer-family form extension."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FamilyCode(str, Enum):
    """Customer family codes the registration rules branch on."""

    PARTICULAR = "PARTICULAR"
    PROFESSIONAL = "PROFESSIONAL"


CUSTOMER_FAMILY_PARTICULAR: str = FamilyCode.PARTICULAR.value
CUSTOMER_FAMILY_PROFESSIONAL: str = FamilyCode.PROFESSIONAL.value


class CustomerFamily(BaseModel):
    """A customer category record, owned by the external family catalog."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(
        ...,
        min_length=1,
        description="Stable family identifier (e.g., 'particular', 'professional')",
    )
    title: str = Field(
        ...,
        min_length=1,
        description="Display label, used as a translation message id",
    )

    def __repr__(self) -> str:
        """Human-readable representation."""
        return f"CustomerFamily(code={self.code!r}, title={self.title!r})"


class Violation(BaseModel):
    """A validation failure recorded against a single form field."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., min_length=1, description="Name of the offending field")
    message: str = Field(..., min_length=1, description="Translated, user-facing message")


# Custom Exceptions
class CustomerFamilyError(Exception):
    """Base exception for all library errors."""
    pass


class DataSourceError(CustomerFamilyError):
    """The customer family catalog could not be queried."""
    pass


class FormBuildError(CustomerFamilyError):
    """A field could not be added to a form builder."""
    pass

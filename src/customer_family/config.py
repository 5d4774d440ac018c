"""Configuration for the customer-family form listener."""
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from customer_family.translation import MESSAGE_DOMAIN

THELIA_CUSTOMER_CREATE_FORM_NAME: str = "thelia_customer_create"

DEFAULT_PRIORITY: int = 128


class ListenerSettings(BaseModel):
    """Which form the listener extends, and how it hooks in."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    form_name: str = Field(
        THELIA_CUSTOMER_CREATE_FORM_NAME,
        min_length=1,
        description="Name of the customer creation form to extend",
    )
    priority: int = Field(
        DEFAULT_PRIORITY,
        description="Listener priority on the after-build event (higher runs first)",
    )
    message_domain: str = Field(
        MESSAGE_DOMAIN,
        min_length=1,
        description="Translation domain for labels and violation messages",
    )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ListenerSettings":
        """Build settings from a plain mapping, ignoring unknown keys."""
        return cls.model_validate(dict(data))

"""Base Pydantic models for SafeCharge requests and responses.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from safecharge_sdk.models.kinds import RequestKind

SUCCESS_STATUS = "SUCCESS"
ERROR_STATUS = "ERROR"


class WireModel(BaseModel):
    """Model with camelCase wire aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Shared Value Models
# =============================================================================


class Item(WireModel):
    """Order line item. Price and quantity are decimal strings."""

    name: str
    price: str
    quantity: str


class UrlDetails(WireModel):
    """Redirect URLs used by APM and payment page flows."""

    success_url: str | None = None
    failure_url: str | None = None
    pending_url: str | None = None
    notification_url: str | None = None


class CardData(WireModel):
    """Raw card data for card payments and tokenization."""

    card_number: str | None = None
    card_holder_name: str | None = None
    expiration_month: str | None = None
    expiration_year: str | None = None
    cvv: str | None = Field(default=None, alias="CVV")
    cc_temp_token: str | None = None


class UserDetails(WireModel):
    """Customer contact details."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    zip: str | None = None
    country: str | None = None


# =============================================================================
# Request / Response Bases
# =============================================================================


class SafechargeRequest(WireModel):
    """Base request sent to the SafeCharge API.

    Subclasses set ``kind`` to the operation they represent. ``server_host``
    only selects the target URL: it is never serialized and the executor
    clears it before sending.
    """

    kind: ClassVar[RequestKind | None] = None

    server_host: str | None = Field(default=None, exclude=True)

    merchant_id: str | None = None
    merchant_site_id: str | None = None
    client_request_id: str | None = None
    client_unique_id: str | None = None
    time_stamp: str | None = None
    checksum: str | None = None
    session_token: str | None = None


class SafechargeResponse(WireModel):
    """Base response returned by the SafeCharge API.

    Fields not declared on the model are kept as extras.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    status: str | None = None
    err_code: int | None = None
    reason: str | None = None
    merchant_id: str | None = None
    merchant_site_id: str | None = None
    version: str | None = None
    client_request_id: str | None = None
    client_unique_id: str | None = None
    internal_request_id: int | None = None
    session_token: str | None = None
    gw_error_code: int | None = None
    gw_error_reason: str | None = None
    gw_extended_error_code: int | None = None

    @property
    def succeeded(self) -> bool:
        """Check if the API reported the operation as successful."""
        return self.status == SUCCESS_STATUS

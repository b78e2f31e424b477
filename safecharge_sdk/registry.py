"""Endpoint registry: request kind -> (response model, endpoint path).

The table is fixed at import time and read-only afterwards, so lookups need no
locking. Looking up a kind that has no entry raises ``UnregisteredRequestError``.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from safecharge_sdk.exceptions import UnregisteredRequestError
from safecharge_sdk.models import responses as r
from safecharge_sdk.models.base import SafechargeRequest, SafechargeResponse
from safecharge_sdk.models.kinds import RequestKind

API_PREFIX = "api/v1/"


@dataclass(frozen=True)
class EndpointEntry:
    """One supported API operation."""

    request_kind: RequestKind
    response_model: type[SafechargeResponse]
    path: str


def _entry(kind: RequestKind, response_model: type[SafechargeResponse]) -> EndpointEntry:
    return EndpointEntry(kind, response_model, f"{API_PREFIX}{kind.value}.do")


ENDPOINTS: tuple[EndpointEntry, ...] = (
    _entry(RequestKind.GET_SESSION_TOKEN, r.GetSessionTokenResponse),
    _entry(RequestKind.OPEN_ORDER, r.OpenOrderResponse),
    _entry(RequestKind.UPDATE_ORDER, r.UpdateOrderResponse),
    _entry(RequestKind.GET_ORDER_DETAILS, r.GetOrderDetailsResponse),
    _entry(RequestKind.PAYMENT_CC, r.PaymentCCResponse),
    _entry(RequestKind.PAYMENT_APM, r.PaymentAPMResponse),
    _entry(RequestKind.AUTHORIZATION_3D, r.Authorization3DResponse),
    _entry(RequestKind.DYNAMIC_3D, r.Dynamic3DResponse),
    _entry(RequestKind.CARD_TOKENIZATION, r.CardTokenizationResponse),
    _entry(RequestKind.PAYMENT_3D, r.Payment3DResponse),
    _entry(RequestKind.ADD_UPO_CREDIT_CARD_BY_TEMP_TOKEN, r.AddUPOCreditCardByTempTokenResponse),
    _entry(RequestKind.SETTLE_TRANSACTION, r.SettleTransactionResponse),
    _entry(RequestKind.VOID_TRANSACTION, r.VoidTransactionResponse),
    _entry(RequestKind.REFUND_TRANSACTION, r.RefundTransactionResponse),
    _entry(RequestKind.ADD_UPO_CREDIT_CARD, r.AddUPOCreditCardResponse),
    _entry(RequestKind.ADD_UPO_APM, r.AddUPOAPMResponse),
    _entry(RequestKind.GET_MERCHANT_PAYMENT_METHODS, r.GetMerchantPaymentMethodsResponse),
    _entry(RequestKind.CANCEL_SUBSCRIPTION, r.CancelSubscriptionResponse),
    _entry(RequestKind.CREATE_SUBSCRIPTION, r.CreateSubscriptionResponse),
    _entry(RequestKind.GET_SUBSCRIPTIONS_LIST, r.GetSubscriptionsListResponse),
    _entry(RequestKind.GET_SUBSCRIPTION_PLANS, r.GetSubscriptionPlansResponse),
    _entry(RequestKind.PAYOUT, r.PayoutResponse),
    _entry(RequestKind.CREATE_USER, r.UserResponse),
    _entry(RequestKind.UPDATE_USER, r.UserResponse),
    _entry(RequestKind.GET_USER_DETAILS, r.GetUserDetailsResponse),
    _entry(RequestKind.ADD_UPO_CREDIT_CARD_BY_TOKEN, r.AddUPOCreditCardByTokenResponse),
    _entry(RequestKind.GET_USER_UPOS, r.GetUserUPOsResponse),
    _entry(RequestKind.EDIT_UPO_CREDIT_CARD, r.EditUPOCreditCardResponse),
    _entry(RequestKind.EDIT_UPO_APM, r.EditUPOAPMResponse),
    _entry(RequestKind.ENABLE_UPO, r.EnableUPOResponse),
    _entry(RequestKind.DELETE_UPO, r.DeleteUPOResponse),
    _entry(RequestKind.SUSPEND_UPO, r.SuspendUPOResponse),
    _entry(RequestKind.GET_PAYMENT_PAGE, r.GetPaymentPageResponse),
)

_ENTRIES = MappingProxyType({entry.request_kind: entry for entry in ENDPOINTS})

if len(_ENTRIES) != len(ENDPOINTS) or set(_ENTRIES) != set(RequestKind):
    raise RuntimeError("Every RequestKind must have exactly one endpoint entry")


def kind_of(request: SafechargeRequest | type[SafechargeRequest]) -> RequestKind | None:
    """Return the request kind of a request instance or class."""
    return getattr(request, "kind", None)


def resolve_entry(kind: Any) -> EndpointEntry:
    """Return the endpoint entry for a request kind.

    Args:
        kind: A ``RequestKind`` (or its operation name).

    Returns:
        The registered EndpointEntry.

    Raises:
        UnregisteredRequestError: If no entry exists for ``kind``.
    """
    try:
        return _ENTRIES[RequestKind(kind)]
    except (KeyError, TypeError, ValueError) as e:
        raise UnregisteredRequestError(kind) from e


def resolve_path(kind: Any) -> str:
    """Return the path suffix appended to the server host for ``kind``."""
    return resolve_entry(kind).path


def resolve_response_kind(kind: Any) -> type[SafechargeResponse]:
    """Return the response model replies to ``kind`` are decoded into."""
    return resolve_entry(kind).response_model


def request_kinds_for(response_model: type[SafechargeResponse]) -> tuple[RequestKind, ...]:
    """Return every request kind whose replies decode into ``response_model``."""
    return tuple(
        entry.request_kind for entry in ENDPOINTS if entry.response_model is response_model
    )

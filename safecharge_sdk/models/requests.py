"""Request models, one per API operation."""

from typing import ClassVar

from pydantic import Field

from safecharge_sdk.models.base import (
    CardData,
    Item,
    SafechargeRequest,
    UrlDetails,
    UserDetails,
)
from safecharge_sdk.models.kinds import RequestKind

__all__ = [
    "GetSessionTokenRequest",
    "OpenOrderRequest",
    "UpdateOrderRequest",
    "GetOrderDetailsRequest",
    "PaymentCCRequest",
    "PaymentAPMRequest",
    "Authorization3DRequest",
    "Dynamic3DRequest",
    "CardTokenizationRequest",
    "Payment3DRequest",
    "AddUPOCreditCardByTempTokenRequest",
    "SettleTransactionRequest",
    "VoidTransactionRequest",
    "RefundTransactionRequest",
    "AddUPOCreditCardRequest",
    "AddUPOAPMRequest",
    "GetMerchantPaymentMethodsRequest",
    "CancelSubscriptionRequest",
    "CreateSubscriptionRequest",
    "GetSubscriptionsListRequest",
    "GetSubscriptionPlansRequest",
    "PayoutRequest",
    "CreateUserRequest",
    "UpdateUserRequest",
    "GetUserDetailsRequest",
    "AddUPOCreditCardByTokenRequest",
    "GetUserUPOsRequest",
    "EditUPOCreditCardRequest",
    "EditUPOAPMRequest",
    "EnableUPORequest",
    "DeleteUPORequest",
    "SuspendUPORequest",
    "GetPaymentPageRequest",
]

# =============================================================================
# Shared Field Groups
# =============================================================================


class _OrderFields(SafechargeRequest):
    amount: str | None = None
    currency: str | None = None
    items: list[Item] | None = None
    user_token_id: str | None = None
    billing_address: UserDetails | None = None
    shipping_address: UserDetails | None = None
    user_details: UserDetails | None = None
    url_details: UrlDetails | None = None


class _TransactionFields(SafechargeRequest):
    amount: str | None = None
    currency: str | None = None
    related_transaction_id: str | None = None
    auth_code: str | None = None
    comment: str | None = None


class _UserFields(SafechargeRequest):
    user_token_id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    country_code: str | None = None
    language_code: str | None = None


class _UPOFields(SafechargeRequest):
    user_token_id: str | None = None
    user_payment_option_id: str | None = None


# =============================================================================
# Sessions And Orders
# =============================================================================


class GetSessionTokenRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.GET_SESSION_TOKEN


class OpenOrderRequest(_OrderFields):
    kind: ClassVar[RequestKind] = RequestKind.OPEN_ORDER


class UpdateOrderRequest(_OrderFields):
    kind: ClassVar[RequestKind] = RequestKind.UPDATE_ORDER

    order_id: str | None = None


class GetOrderDetailsRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.GET_ORDER_DETAILS

    order_id: str | None = None


class GetPaymentPageRequest(_OrderFields):
    kind: ClassVar[RequestKind] = RequestKind.GET_PAYMENT_PAGE

    payment_method: str | None = None


# =============================================================================
# Payments
# =============================================================================


class PaymentCCRequest(_OrderFields):
    kind: ClassVar[RequestKind] = RequestKind.PAYMENT_CC

    order_id: str | None = None
    transaction_type: str | None = None
    card_data: CardData | None = None
    user_payment_option_id: str | None = None


class PaymentAPMRequest(_OrderFields):
    kind: ClassVar[RequestKind] = RequestKind.PAYMENT_APM

    order_id: str | None = None
    country: str | None = None
    payment_method: str | None = None
    user_account_details: dict[str, str] | None = None


class Authorization3DRequest(_OrderFields):
    kind: ClassVar[RequestKind] = RequestKind.AUTHORIZATION_3D

    order_id: str | None = None
    card_data: CardData | None = None


class Dynamic3DRequest(_OrderFields):
    kind: ClassVar[RequestKind] = RequestKind.DYNAMIC_3D

    order_id: str | None = None
    card_data: CardData | None = None
    is_dynamic_3d: str | None = Field(default=None, alias="isDynamic3D")


class Payment3DRequest(_OrderFields):
    kind: ClassVar[RequestKind] = RequestKind.PAYMENT_3D

    order_id: str | None = None
    pa_response: str | None = None
    related_transaction_id: str | None = None


class CardTokenizationRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.CARD_TOKENIZATION

    card_data: CardData | None = None
    billing_address: UserDetails | None = None


class PayoutRequest(_TransactionFields):
    kind: ClassVar[RequestKind] = RequestKind.PAYOUT

    user_token_id: str | None = None
    user_payment_option_id: str | None = None


# =============================================================================
# Transaction Management
# =============================================================================


class SettleTransactionRequest(_TransactionFields):
    kind: ClassVar[RequestKind] = RequestKind.SETTLE_TRANSACTION


class VoidTransactionRequest(_TransactionFields):
    kind: ClassVar[RequestKind] = RequestKind.VOID_TRANSACTION


class RefundTransactionRequest(_TransactionFields):
    kind: ClassVar[RequestKind] = RequestKind.REFUND_TRANSACTION


# =============================================================================
# Users And User Payment Options
# =============================================================================


class CreateUserRequest(_UserFields):
    kind: ClassVar[RequestKind] = RequestKind.CREATE_USER


class UpdateUserRequest(_UserFields):
    kind: ClassVar[RequestKind] = RequestKind.UPDATE_USER


class GetUserDetailsRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.GET_USER_DETAILS

    user_token_id: str | None = None


class GetUserUPOsRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.GET_USER_UPOS

    user_token_id: str | None = None


class AddUPOCreditCardRequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.ADD_UPO_CREDIT_CARD

    cc_card_number: str | None = None
    cc_exp_month: str | None = None
    cc_exp_year: str | None = None
    cc_name_on_card: str | None = None


class AddUPOCreditCardByTempTokenRequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.ADD_UPO_CREDIT_CARD_BY_TEMP_TOKEN

    cc_temp_token: str | None = None
    billing_address: UserDetails | None = None


class AddUPOCreditCardByTokenRequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.ADD_UPO_CREDIT_CARD_BY_TOKEN

    card_token: str | None = None
    card_holder_name: str | None = None
    expiration_month: str | None = None
    expiration_year: str | None = None


class AddUPOAPMRequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.ADD_UPO_APM

    payment_method_name: str | None = None
    apm_data: dict[str, str] | None = None


class EditUPOCreditCardRequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.EDIT_UPO_CREDIT_CARD

    cc_exp_month: str | None = None
    cc_exp_year: str | None = None
    cc_name_on_card: str | None = None


class EditUPOAPMRequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.EDIT_UPO_APM

    apm_data: dict[str, str] | None = None


class EnableUPORequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.ENABLE_UPO


class DeleteUPORequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.DELETE_UPO


class SuspendUPORequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.SUSPEND_UPO


class GetMerchantPaymentMethodsRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.GET_MERCHANT_PAYMENT_METHODS

    currency_code: str | None = None
    country_code: str | None = None
    language_code: str | None = None


# =============================================================================
# Subscriptions
# =============================================================================


class CreateSubscriptionRequest(_UPOFields):
    kind: ClassVar[RequestKind] = RequestKind.CREATE_SUBSCRIPTION

    plan_id: str | None = None
    initial_amount: str | None = None
    recurring_amount: str | None = None
    currency: str | None = None


class CancelSubscriptionRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.CANCEL_SUBSCRIPTION

    subscription_id: str | None = None


class GetSubscriptionsListRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.GET_SUBSCRIPTIONS_LIST

    user_token_id: str | None = None
    plan_id: str | None = None
    subscription_status: str | None = None


class GetSubscriptionPlansRequest(SafechargeRequest):
    kind: ClassVar[RequestKind] = RequestKind.GET_SUBSCRIPTION_PLANS

    plan_status: str | None = None

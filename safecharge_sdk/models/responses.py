"""Response models, one per API operation.

Create and update user requests share ``UserResponse``.
"""

from typing import Any

from safecharge_sdk.models.base import SafechargeResponse, WireModel

__all__ = [
    "GetSessionTokenResponse",
    "OpenOrderResponse",
    "UpdateOrderResponse",
    "GetOrderDetailsResponse",
    "PaymentCCResponse",
    "PaymentAPMResponse",
    "Authorization3DResponse",
    "Dynamic3DResponse",
    "CardTokenizationResponse",
    "Payment3DResponse",
    "AddUPOCreditCardByTempTokenResponse",
    "SettleTransactionResponse",
    "VoidTransactionResponse",
    "RefundTransactionResponse",
    "AddUPOCreditCardResponse",
    "AddUPOAPMResponse",
    "GetMerchantPaymentMethodsResponse",
    "CancelSubscriptionResponse",
    "CreateSubscriptionResponse",
    "GetSubscriptionsListResponse",
    "GetSubscriptionPlansResponse",
    "PayoutResponse",
    "UserResponse",
    "GetUserDetailsResponse",
    "AddUPOCreditCardByTokenResponse",
    "GetUserUPOsResponse",
    "EditUPOCreditCardResponse",
    "EditUPOAPMResponse",
    "EnableUPOResponse",
    "DeleteUPOResponse",
    "SuspendUPOResponse",
    "GetPaymentPageResponse",
]

# =============================================================================
# Shared Field Groups
# =============================================================================


class _OrderResponse(SafechargeResponse):
    order_id: str | None = None
    user_token_id: str | None = None


class _TransactionResponse(SafechargeResponse):
    transaction_id: str | None = None
    external_transaction_id: str | None = None
    transaction_status: str | None = None
    auth_code: str | None = None


class _PaymentResponse(_TransactionResponse):
    order_id: str | None = None
    user_token_id: str | None = None
    transaction_type: str | None = None
    user_payment_option_id: str | None = None


class _UPOResponse(SafechargeResponse):
    user_payment_option_id: str | None = None


class PaymentMethod(WireModel):
    """Payment method offered to the merchant."""

    payment_method: str | None = None
    payment_method_display_name: list[dict[str, Any]] | None = None
    countries: list[str] | None = None
    currencies: list[str] | None = None


# =============================================================================
# Sessions And Orders
# =============================================================================


class GetSessionTokenResponse(SafechargeResponse):
    pass


class OpenOrderResponse(_OrderResponse):
    pass


class UpdateOrderResponse(_OrderResponse):
    pass


class GetOrderDetailsResponse(_OrderResponse):
    amount: str | None = None
    currency: str | None = None
    items: list[dict[str, Any]] | None = None


class GetPaymentPageResponse(_OrderResponse):
    payment_page_url: str | None = None


# =============================================================================
# Payments
# =============================================================================


class PaymentCCResponse(_PaymentResponse):
    pass


class PaymentAPMResponse(_PaymentResponse):
    redirect_url: str | None = None
    payment_method: str | None = None


class Authorization3DResponse(_PaymentResponse):
    is_enrolled: str | None = None
    pa_request: str | None = None
    acs_url: str | None = None


class Dynamic3DResponse(Authorization3DResponse):
    three_d_flow: str | None = None


class Payment3DResponse(_PaymentResponse):
    pass


class CardTokenizationResponse(SafechargeResponse):
    cc_temp_token: str | None = None


class PayoutResponse(_TransactionResponse):
    user_token_id: str | None = None


# =============================================================================
# Transaction Management
# =============================================================================


class SettleTransactionResponse(_TransactionResponse):
    pass


class VoidTransactionResponse(_TransactionResponse):
    pass


class RefundTransactionResponse(_TransactionResponse):
    pass


# =============================================================================
# Users And User Payment Options
# =============================================================================


class UserResponse(SafechargeResponse):
    user_id: int | None = None


class GetUserDetailsResponse(SafechargeResponse):
    user_details: dict[str, Any] | None = None


class GetUserUPOsResponse(SafechargeResponse):
    payment_methods: list[dict[str, Any]] | None = None


class AddUPOCreditCardResponse(_UPOResponse):
    pass


class AddUPOCreditCardByTempTokenResponse(_UPOResponse):
    pass


class AddUPOCreditCardByTokenResponse(_UPOResponse):
    pass


class AddUPOAPMResponse(_UPOResponse):
    pass


class EditUPOCreditCardResponse(SafechargeResponse):
    pass


class EditUPOAPMResponse(SafechargeResponse):
    pass


class EnableUPOResponse(SafechargeResponse):
    pass


class DeleteUPOResponse(SafechargeResponse):
    pass


class SuspendUPOResponse(SafechargeResponse):
    pass


class GetMerchantPaymentMethodsResponse(SafechargeResponse):
    payment_methods: list[PaymentMethod] | None = None


# =============================================================================
# Subscriptions
# =============================================================================


class CreateSubscriptionResponse(SafechargeResponse):
    subscription_id: int | None = None


class CancelSubscriptionResponse(SafechargeResponse):
    pass


class GetSubscriptionsListResponse(SafechargeResponse):
    subscriptions: list[dict[str, Any]] | None = None
    total_count: int | None = None


class GetSubscriptionPlansResponse(SafechargeResponse):
    plans: list[dict[str, Any]] | None = None
    total_count: int | None = None

"""Request kind discriminator.

Each supported API operation has exactly one member. The member value is the
operation name used by the REST API.
"""

from enum import Enum


class RequestKind(str, Enum):
    """API operations supported by the SDK."""

    GET_SESSION_TOKEN = "getSessionToken"
    OPEN_ORDER = "openOrder"
    UPDATE_ORDER = "updateOrder"
    GET_ORDER_DETAILS = "getOrderDetails"
    PAYMENT_CC = "paymentCC"
    PAYMENT_APM = "paymentAPM"
    AUTHORIZATION_3D = "authorization3D"
    DYNAMIC_3D = "dynamic3D"
    CARD_TOKENIZATION = "cardTokenization"
    PAYMENT_3D = "payment3D"
    ADD_UPO_CREDIT_CARD_BY_TEMP_TOKEN = "addUPOCreditCardByTempToken"
    SETTLE_TRANSACTION = "settleTransaction"
    VOID_TRANSACTION = "voidTransaction"
    REFUND_TRANSACTION = "refundTransaction"
    ADD_UPO_CREDIT_CARD = "addUPOCreditCard"
    ADD_UPO_APM = "addUPOAPM"
    GET_MERCHANT_PAYMENT_METHODS = "getMerchantPaymentMethods"
    CANCEL_SUBSCRIPTION = "cancelSubscription"
    CREATE_SUBSCRIPTION = "createSubscription"
    GET_SUBSCRIPTIONS_LIST = "getSubscriptionsList"
    GET_SUBSCRIPTION_PLANS = "getSubscriptionPlans"
    PAYOUT = "payout"
    CREATE_USER = "createUser"
    UPDATE_USER = "updateUser"
    GET_USER_DETAILS = "getUserDetails"
    ADD_UPO_CREDIT_CARD_BY_TOKEN = "addUPOCreditCardByToken"
    GET_USER_UPOS = "getUserUPOs"
    EDIT_UPO_CREDIT_CARD = "editUPOCC"
    EDIT_UPO_APM = "editUPOAPM"
    ENABLE_UPO = "enableUPO"
    DELETE_UPO = "deleteUPO"
    SUSPEND_UPO = "suspendUPO"
    GET_PAYMENT_PAGE = "getPaymentPage"

    def __str__(self) -> str:
        return self.value

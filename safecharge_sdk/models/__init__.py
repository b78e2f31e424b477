"""Public request and response models for the SafeCharge API.

Example:
    from safecharge_sdk.models import GetSessionTokenRequest

    request = GetSessionTokenRequest(
        server_host="https://ppp-test.safecharge.com/ppp/",
        merchant_id="2885023999185468261",
        merchant_site_id="5612",
    )
"""

from safecharge_sdk.models import requests, responses
from safecharge_sdk.models.base import (
    ERROR_STATUS,
    SUCCESS_STATUS,
    CardData,
    Item,
    SafechargeRequest,
    SafechargeResponse,
    UrlDetails,
    UserDetails,
)
from safecharge_sdk.models.kinds import RequestKind
from safecharge_sdk.models.requests import *  # noqa: F403
from safecharge_sdk.models.responses import *  # noqa: F403

__all__ = [
    "RequestKind",
    "SafechargeRequest",
    "SafechargeResponse",
    "Item",
    "UrlDetails",
    "CardData",
    "UserDetails",
    "SUCCESS_STATUS",
    "ERROR_STATUS",
    *requests.__all__,
    *responses.__all__,
]

from .entitlements import (
    ExpiredSubscription,
    NotPurchased,
    Purchased,
    PurchasedSubscription,
    get_matching_entries,
    verify_purchase,
    verify_subscription,
)
from .exceptions import (
    JsonDecodeError,
    NetworkError,
    NoReceiptData,
    NoRemoteData,
    ReceiptInvalid,
    ReceiptValidationException,
    RequestBodyEncodeError,
)
from .receipt import load_receipt_data, verify_receipt
from .status import ReceiptStatus, receipt_status
from .validator import ReceiptValidator, validate_receipt

__all__ = [
    "ExpiredSubscription",
    "NotPurchased",
    "Purchased",
    "PurchasedSubscription",
    "get_matching_entries",
    "verify_purchase",
    "verify_subscription",
    "JsonDecodeError",
    "NetworkError",
    "NoReceiptData",
    "NoRemoteData",
    "ReceiptInvalid",
    "ReceiptValidationException",
    "RequestBodyEncodeError",
    "load_receipt_data",
    "verify_receipt",
    "ReceiptStatus",
    "receipt_status",
    "ReceiptValidator",
    "validate_receipt",
]

import enum

APPSTORE_STATUS_VALID = 0
APPSTORE_STATUS_INVALID_JSON = 21000
APPSTORE_STATUS_MALFORMED_RECEIPT_DATA = 21002
APPSTORE_STATUS_RECEIPT_AUTHENTICATION = 21003
APPSTORE_STATUS_SHARED_SECRET_MISMATCH = 21004
APPSTORE_STATUS_RECEIPT_SERVER_DOWN = 21005
APPSTORE_STATUS_EXPIRED_SUBSCRIPTION = 21006
APPSTORE_STATUS_TEST_ENVIRONMENT_RECEIPT = 21007
APPSTORE_STATUS_PROD_ENVIRONMENT_RECEIPT = 21008
APPSTORE_STATUS_INTERNAL_ERROR = 21009
APPSTORE_STATUS_UNAUTHORIZED_RECEIPT = 21010
APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MIN = 21100
APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MAX = 21199


class ReceiptStatus(enum.IntEnum):
    """The App Store's verdict on a receipt"""

    # The status could not be mapped to anything we know about
    UNKNOWN = -2
    # The response had no (integer) status at all
    NONE = -1
    VALID = APPSTORE_STATUS_VALID
    # The App Store could not read the JSON object you provided.
    JSON_NOT_READABLE = APPSTORE_STATUS_INVALID_JSON
    # The data in the receipt-data property was malformed or missing.
    MALFORMED_OR_MISSING_DATA = APPSTORE_STATUS_MALFORMED_RECEIPT_DATA
    # The receipt could not be authenticated.
    RECEIPT_COULD_NOT_BE_AUTHENTICATED = APPSTORE_STATUS_RECEIPT_AUTHENTICATION
    # The shared secret does not match the one on file for the account.
    SECRET_NOT_MATCHING = APPSTORE_STATUS_SHARED_SECRET_MISMATCH
    # The receipt server is not currently available.
    RECEIPT_SERVER_UNAVAILABLE = APPSTORE_STATUS_RECEIPT_SERVER_DOWN
    # NOTE: Only returned for iOS 6 style transaction receipts for
    # auto-renewable subscriptions. An app receipt holding an expired
    # subscription still comes back as VALID.
    SUBSCRIPTION_EXPIRED = APPSTORE_STATUS_EXPIRED_SUBSCRIPTION
    # A sandbox receipt was sent to the production service.
    TEST_RECEIPT = APPSTORE_STATUS_TEST_ENVIRONMENT_RECEIPT
    # A production receipt was sent to the sandbox service.
    PRODUCTION_ENVIRONMENT = APPSTORE_STATUS_PROD_ENVIRONMENT_RECEIPT
    INTERNAL_ERROR = APPSTORE_STATUS_INTERNAL_ERROR
    # Treated as if the purchase was never made.
    UNAUTHORIZED_RECEIPT = APPSTORE_STATUS_UNAUTHORIZED_RECEIPT
    # Anything in the 21100-21199 range
    INTERNAL_DATA_ACCESS_ERROR = APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MIN

    @property
    def is_valid(self):
        return self is ReceiptStatus.VALID


def receipt_status(code):
    """
    Map a raw ``status`` value from the App Store to a ReceiptStatus.

    Defined for every input: values that are not numbers map to NONE and
    codes Apple has not documented map to UNKNOWN. A float is read as the
    integer it holds; floats with a fractional part are not codes at all.
    """
    if isinstance(code, bool) or not isinstance(code, (int, float)):
        return ReceiptStatus.NONE

    if isinstance(code, float):
        if not code.is_integer():
            return ReceiptStatus.UNKNOWN
        code = int(code)

    if (
        APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MIN
        <= code
        <= APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MAX
    ):
        return ReceiptStatus.INTERNAL_DATA_ACCESS_ERROR

    # UNKNOWN and NONE are never sent by Apple
    if code < 0:
        return ReceiptStatus.UNKNOWN

    try:
        return ReceiptStatus(code)
    except ValueError:
        return ReceiptStatus.UNKNOWN

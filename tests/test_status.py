from iapcheck.status import (
    ReceiptStatus,
    receipt_status,
    APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MIN,
    APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MAX,
)


def test_receipt_status_known_codes():
    statuses = [
        [0, ReceiptStatus.VALID],
        [21000, ReceiptStatus.JSON_NOT_READABLE],
        [21002, ReceiptStatus.MALFORMED_OR_MISSING_DATA],
        [21003, ReceiptStatus.RECEIPT_COULD_NOT_BE_AUTHENTICATED],
        [21004, ReceiptStatus.SECRET_NOT_MATCHING],
        [21005, ReceiptStatus.RECEIPT_SERVER_UNAVAILABLE],
        [21006, ReceiptStatus.SUBSCRIPTION_EXPIRED],
        [21007, ReceiptStatus.TEST_RECEIPT],
        [21008, ReceiptStatus.PRODUCTION_ENVIRONMENT],
        [21009, ReceiptStatus.INTERNAL_ERROR],
        [21010, ReceiptStatus.UNAUTHORIZED_RECEIPT],
        [
            APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MIN,
            ReceiptStatus.INTERNAL_DATA_ACCESS_ERROR,
        ],
        [21150, ReceiptStatus.INTERNAL_DATA_ACCESS_ERROR],
        [
            APPSTORE_STATUS_INTERNAL_DATA_ACCESS_ERROR_MAX,
            ReceiptStatus.INTERNAL_DATA_ACCESS_ERROR,
        ],
    ]

    for code, status in statuses:
        assert receipt_status(code) is status


def test_receipt_status_unknown_codes():
    for code in (1, 21001, 21011, 21200, 99999, -1, -2):
        status = receipt_status(code)
        assert status is ReceiptStatus.UNKNOWN
        assert not status.is_valid


def test_receipt_status_not_an_integer():
    for code in (None, "0", "21002", True, False, [], {}):
        status = receipt_status(code)
        assert status is ReceiptStatus.NONE
        assert not status.is_valid


def test_only_valid_is_valid():
    assert ReceiptStatus.VALID.is_valid
    assert [status for status in ReceiptStatus if status.is_valid] == [
        ReceiptStatus.VALID
    ]


def test_receipt_status_floats():
    assert receipt_status(0.0) is ReceiptStatus.VALID
    assert receipt_status(21002.0) is ReceiptStatus.MALFORMED_OR_MISSING_DATA
    assert receipt_status(21150.0) is ReceiptStatus.INTERNAL_DATA_ACCESS_ERROR

    for code in (0.5, 21002.5, float("inf"), float("nan")):
        assert receipt_status(code) is ReceiptStatus.UNKNOWN

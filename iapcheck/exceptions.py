from .status import ReceiptStatus


class ReceiptValidationException(Exception):
    def __init__(self, receipt, *args, **kwargs):
        self.receipt = receipt
        super(ReceiptValidationException, self).__init__(*args, **kwargs)


class NoReceiptData(ReceiptValidationException):
    """There is no receipt installed, nothing was sent to Apple"""


class RequestBodyEncodeError(ReceiptValidationException):
    pass


class NetworkError(ReceiptValidationException):
    pass


class NoRemoteData(ReceiptValidationException):
    pass


class JsonDecodeError(ReceiptValidationException):
    def __init__(self, raw_body, *args, **kwargs):
        self.raw_body = raw_body
        super(JsonDecodeError, self).__init__({}, *args, **kwargs)


class ReceiptInvalid(ReceiptValidationException):
    """
    Apple answered, but did not accept the receipt.

    The parsed response is kept on ``receipt`` so fields such as
    ``environment`` can still be inspected.
    """

    def __init__(self, receipt, status, *args, **kwargs):
        self.status = status
        super(ReceiptInvalid, self).__init__(receipt, *args, **kwargs)

    @property
    def is_unknown(self):
        return self.status in (ReceiptStatus.UNKNOWN, ReceiptStatus.NONE)

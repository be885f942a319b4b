import base64
import concurrent.futures
import logging

from .exceptions import NoReceiptData
from .settings import RECEIPT_FILE
from .validator import ReceiptValidator

log = logging.getLogger(__name__)


def load_receipt_data(path=None):
    """
    Read the receipt installed at ``path`` (default: the RECEIPT_FILE setting).

    Returns None when there is no receipt.
    """
    path = path or RECEIPT_FILE
    if not path:
        return None

    try:
        with open(path, "rb") as receipt_file:
            data = receipt_file.read()
    except FileNotFoundError:
        log.info("No receipt found at {}".format(path))
        return None
    except OSError as exc:
        log.warning("Unable to read receipt at {}: {}".format(path, exc))
        return None

    return data or None


def encode_receipt(data):
    return base64.b64encode(data).decode("utf-8")


def verify_receipt(validator=None, path=None, password=None):
    """
    Validate the installed receipt with Apple.

    Returns a future, like ``ReceiptValidator.validate``. If there is no
    receipt the future has already failed with NoReceiptData and Apple is
    never contacted.
    """
    data = load_receipt_data(path)
    if data is None:
        future = concurrent.futures.Future()
        future.set_exception(NoReceiptData({}, "No receipt data to validate"))
        return future

    validator = validator or ReceiptValidator()
    return validator.validate(encode_receipt(data), password=password)

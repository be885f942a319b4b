import base64
import concurrent.futures
import json
import logging
import threading

import requests

from .exceptions import (
    JsonDecodeError,
    NetworkError,
    NoRemoteData,
    ReceiptInvalid,
    RequestBodyEncodeError,
)
from .settings import (
    IAP_SHARED_SECRET,
    MAX_WORKERS,
    PRODUCTION_VERIFICATION_URL,
    REQUEST_TIMEOUT,
    VERIFICATION_URL,
)
from .status import receipt_status


log = logging.getLogger(__name__)

_executor = None
_executor_lock = threading.Lock()


def _get_executor():
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=MAX_WORKERS, thread_name_prefix="iapcheck"
            )
    return _executor


def build_request_body(receipt_data, password=None):
    """
    Serialize the body Apple expects for a verifyReceipt call.

    ``receipt_data`` is either the raw receipt bytes or the receipt already
    base64 encoded. The password (the app's shared secret) is only included
    when one is given.
    """
    try:
        if isinstance(receipt_data, bytes):
            receipt_data = base64.b64encode(receipt_data).decode("utf-8")

        payload = {"receipt-data": receipt_data}

        if password is not None:
            payload["password"] = password

        return json.dumps(payload)
    except (TypeError, ValueError) as exc:
        raise RequestBodyEncodeError(
            {}, "Unable to encode request body: {}".format(exc)
        )


def parse_response(body):
    """
    Turn the raw body returned by Apple into a receipt document.

    Returns the document when Apple says the receipt is valid, otherwise raises
    one of the receipt validation exceptions.
    """
    if body is None or not len(body):
        raise NoRemoteData({}, "No data in the response")

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            raise JsonDecodeError(
                body.decode("utf-8", "replace"), "Unable to read response"
            )

    try:
        content = json.loads(body)
    except ValueError:
        raise JsonDecodeError(body, "Unable to read response")

    # Anything other than an object carries no status
    if not isinstance(content, dict):
        content = {}

    status = receipt_status(content.get("status"))

    log.info("Received status {} from Apple".format(status.name))

    if not status.is_valid:
        log.warning("Receipt rejected by Apple with status {}".format(status.name))
        raise ReceiptInvalid(
            content, status, "Receipt is not valid: {}".format(status.name)
        )

    return content


def validate_receipt(receipt_data, password=None, url=None, session=None, timeout=None):
    """
    Validate a receipt with Apple, making exactly one request.

    Docs at https://developer.apple.com/documentation/appstorereceipts/verifyreceipt
    """
    url = url or VERIFICATION_URL
    body = build_request_body(receipt_data, password=password)

    log.info(
        "Validating receipt with Apple at the {} url".format(
            "production" if url == PRODUCTION_VERIFICATION_URL else url
        )
    )

    poster = session if session is not None else requests
    try:
        r = poster.post(
            url,
            data=body,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        log.warning("Unable to reach {}: {}".format(url, exc))
        raise NetworkError({}, str(exc))

    return parse_response(r.content)


class ReceiptValidator(object):
    """
    Validates receipts against a single verifyReceipt endpoint.

    ``validate`` does not block: it returns a ``concurrent.futures.Future``
    that resolves once with the receipt document, or with one of the
    exceptions from ``iapcheck.exceptions``. Nothing is retried.
    """

    def __init__(
        self, url=None, password=None, session=None, timeout=None, executor=None
    ):
        self.url = url or VERIFICATION_URL
        self.password = password if password is not None else IAP_SHARED_SECRET
        self.session = session
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT
        self.executor = executor

    def validate(self, receipt_data, password=None):
        if password is None:
            password = self.password

        executor = self.executor or _get_executor()
        return executor.submit(
            validate_receipt,
            receipt_data,
            password=password,
            url=self.url,
            session=self.session,
            timeout=self.timeout,
        )

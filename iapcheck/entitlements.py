import datetime
import logging
import numbers

import pytz

log = logging.getLogger(__name__)


class VerifyResult(object):
    """Base class for the answers given by verify_purchase and verify_subscription"""

    expiry_date = None

    def __eq__(self, other):
        return type(self) is type(other) and self.expiry_date == other.expiry_date

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self.expiry_date))

    def __repr__(self):
        if self.expiry_date is None:
            return "{}()".format(type(self).__name__)
        return "{}(expiry_date={!r})".format(type(self).__name__, self.expiry_date)


class NotPurchased(VerifyResult):
    pass


class Purchased(VerifyResult):
    pass


class PurchasedSubscription(VerifyResult):
    """The subscription is active until ``expiry_date``"""

    def __init__(self, expiry_date):
        self.expiry_date = expiry_date


class ExpiredSubscription(VerifyResult):
    """The subscription lapsed at ``expiry_date``"""

    def __init__(self, expiry_date):
        self.expiry_date = expiry_date


def lookup(document, *path, types=None):
    """
    Walk ``path`` through nested dicts, returning None instead of failing.

    ``types`` optionally restricts the type of the value found at the end of
    the path; a value of any other type is treated as missing.
    """
    value = document
    for key in path:
        if not isinstance(value, dict) or key not in value:
            return None
        value = value[key]

    if types is not None and not isinstance(value, types):
        return None
    return value


def _date_from_ms(value):
    """Parse a *_ms value from the receipt into an aware datetime, or None"""
    if isinstance(value, bool):
        return None

    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    elif not isinstance(value, numbers.Real):
        return None

    try:
        # the date in ms
        seconds = value / 1000.0
        return datetime.datetime.fromtimestamp(seconds, tz=pytz.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _as_utc(date):
    if date.tzinfo is None:
        return pytz.utc.localize(date)
    return date.astimezone(pytz.utc)


def get_matching_entries(product_id, document):
    """
    Return the in-app purchases in the receipt for ``product_id``.

    Entries keep the order Apple returned them in. A receipt without an
    ``in_app`` list simply has no purchases.
    """
    in_apps = lookup(document, "receipt", "in_app", types=list)
    if in_apps is None:
        return []

    return [
        in_app
        for in_app in in_apps
        if lookup(in_app, "product_id", types=str) == product_id
    ]


def verify_purchase(product_id, document):
    """Verify the purchase of a consumable or non-consumable product"""
    if get_matching_entries(product_id, document):
        return Purchased()
    return NotPurchased()


def _get_expiry_date(in_app, valid_duration=None):
    if valid_duration is None:
        return _date_from_ms(in_app.get("expires_date_ms"))

    purchase_date = _date_from_ms(in_app.get("original_purchase_date_ms"))
    if purchase_date is None:
        return None

    try:
        if not isinstance(valid_duration, datetime.timedelta):
            valid_duration = datetime.timedelta(seconds=valid_duration)
        return purchase_date + valid_duration
    except OverflowError:
        # Past datetime.max
        return None


def get_request_date(document):
    """The time Apple handled the validation request, if it says so"""
    return _date_from_ms(lookup(document, "receipt", "request_date_ms"))


def verify_subscription(product_id, document, valid_until=None, valid_duration=None):
    """
    Verify a subscription (auto-renewable, free or non-renewing) in a receipt.

    All the transactions for ``product_id`` are looked at and the one expiring
    last decides. "Now" is the request date Apple put in the receipt, so the
    device clock does not matter; ``valid_until`` (default: the current time)
    is only used when the receipt has no request date.

    Non-renewing subscriptions have no expiry date in the receipt. For those,
    pass ``valid_duration`` (a timedelta or a number of seconds) and the expiry
    is computed from the original purchase date instead.
    """
    in_apps = get_matching_entries(product_id, document)
    if not in_apps:
        return NotPurchased()

    now = get_request_date(document)
    if now is None:
        if valid_until is None:
            valid_until = datetime.datetime.now(tz=pytz.utc)
        now = _as_utc(valid_until)

    expiry_dates = []
    for in_app in in_apps:
        expiry_date = _get_expiry_date(in_app, valid_duration)

        if expiry_date is None:
            log.debug(
                "Ignoring transaction {} for {} without a usable date".format(
                    in_app.get("transaction_id"), product_id
                )
            )
            continue
        expiry_dates.append(expiry_date)

    if not expiry_dates:
        return NotPurchased()

    # The latest expiry date wins, the product may have been renewed or
    # resubscribed to several times
    expiry_dates.sort(reverse=True)
    latest_expiry_date = expiry_dates[0]

    if latest_expiry_date > now:
        return PurchasedSubscription(latest_expiry_date)
    return ExpiredSubscription(latest_expiry_date)

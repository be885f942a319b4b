from django.conf import settings

IAP_SETTINGS = getattr(settings, "IAP_SETTINGS", {})

PRODUCTION_VERIFICATION_URL = "https://buy.itunes.apple.com/verifyReceipt"
SANDBOX_VERIFICATION_URL = "https://sandbox.itunes.apple.com/verifyReceipt"

VERIFICATION_URL = IAP_SETTINGS.get("VERIFICATION_URL", PRODUCTION_VERIFICATION_URL)

IAP_SHARED_SECRET = IAP_SETTINGS.get("SHARED_SECRET")

RECEIPT_FILE = IAP_SETTINGS.get("RECEIPT_FILE")

REQUEST_TIMEOUT = IAP_SETTINGS.get("TIMEOUT")

MAX_WORKERS = IAP_SETTINGS.get("MAX_WORKERS", 4)

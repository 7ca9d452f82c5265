# config/settings/test.py
from .base import *  # noqa

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Tests fake the Zoom HTTP layer; never reach the network.
ZOOM_OAUTH_URL = "https://zoom.test/oauth/token"
ZOOM_API_BASE_URL = "https://api.zoom.test/v2"
ZOOM_SHARE_CLIENTS = False

LOGGING["root"]["level"] = "WARNING"

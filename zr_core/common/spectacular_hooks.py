# zr_core/common/spectacular_hooks.py
from __future__ import annotations

LEGACY_PREFIX = "/api/"
VERSIONED_PREFIX = "/api/v1/"


def preprocess_exclude_legacy_api(endpoints):
    """
    config/urls.py mounts the same urlconf twice (/api/v1/ and the /api/ alias).
    Only the versioned copy belongs in the OpenAPI document, otherwise every
    operationId is generated twice.
    """
    return [
        (path, path_regex, method, callback)
        for path, path_regex, method, callback in endpoints
        if path.startswith(VERSIONED_PREFIX) or not path.startswith(LEGACY_PREFIX)
    ]

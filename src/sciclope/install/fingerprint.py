"""
Installer fingerprint

Identifies one logical installer run so that installers for different
paths or versions on the same host do not share session state.
"""

import hashlib
import json

from sciclope.exceptions import MalformedFingerprint


def fingerprint(install_path: str, version: str) -> str:
    """Return the md5 hex digest of the (path, version) pair.

    This is a namespacing key, not an authentication token.

    Raises:
        MalformedFingerprint: if either input is empty or not a string
    """
    for field, value in (("install path", install_path), ("version", version)):
        if not isinstance(value, str) or not value:
            raise MalformedFingerprint(
                f"Cannot fingerprint installer: invalid {field}",
                field=field,
                details=repr(value)
            )

    # TODO: include the request URL once the web layer exposes a canonical one.
    payload = json.dumps({"path": install_path, "version": version}, sort_keys=True)
    return hashlib.md5(payload.encode("utf-8")).hexdigest()

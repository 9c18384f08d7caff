"""
Content-Type classification.

Decides whether a response body should be sent to the gateway base64 encoded,
based on its content-type and a set of binary MIME type patterns.
"""

import mimetypes
import re
from typing import Iterable, Optional

# type "/" subtype, each a restricted-name token (RFC 6838)
_MEDIA_TYPE_RE = re.compile(
    r"^[a-z0-9][a-z0-9!#$&^_.+-]{0,126}/[a-z0-9][a-z0-9!#$&^_.+-]{0,126}$"
)


def normalize(content_type_header: Optional[str]) -> str:
    """Return the mime type part of a content-type header, ignoring charset etc."""
    if not content_type_header:
        return ""
    return content_type_header.split(";")[0]


def _normalize_pattern(pattern: str) -> Optional[str]:
    pattern = pattern.strip().lower()
    if pattern == "urlencoded":
        return "application/x-www-form-urlencoded"
    if pattern == "multipart":
        return "multipart/*"
    if pattern.startswith("+"):
        return "*/*" + pattern
    if "/" in pattern:
        return pattern
    # Bare file extension, e.g. "png".
    guessed, _ = mimetypes.guess_type("file." + pattern.lstrip("."), strict=False)
    return guessed.lower() if guessed else None


def _mime_match(expected: str, actual: str) -> bool:
    expected_parts = expected.split("/")
    actual_parts = actual.split("/")
    if len(expected_parts) != 2 or len(actual_parts) != 2:
        return False

    expected_type, expected_subtype = expected_parts
    actual_type, actual_subtype = actual_parts

    if expected_type != "*" and expected_type != actual_type:
        return False

    # */*+json style structured syntax suffix
    if expected_subtype.startswith("*+"):
        suffix = expected_subtype[1:]
        return len(actual_subtype) > len(suffix) and actual_subtype.endswith(suffix)

    return expected_subtype == "*" or expected_subtype == actual_subtype


def is_binary(mime_type: Optional[str], binary_mime_types: Iterable[str]) -> bool:
    """
    Whether mime_type matches one of the binary MIME type patterns.

    An empty pattern set means everything is text. Malformed input is never an
    error, it just does not match.
    """
    patterns = [p for p in binary_mime_types or () if isinstance(p, str)]
    if not patterns:
        return False

    actual = (mime_type or "").strip().lower()
    if not _MEDIA_TYPE_RE.match(actual):
        return False

    for pattern in patterns:
        expected = _normalize_pattern(pattern)
        if expected and _mime_match(expected, actual):
            return True
    return False

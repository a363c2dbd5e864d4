"""URL acceptability check.

A deliberately loose shape check, not a URL grammar: optional scheme, a host
of word/dot/dash characters, optional port, then any run of path and query
characters. Acceptability is about shape only; the advisory severity carries
the HTTPS hint.
"""

import re
from dataclasses import dataclass
from typing import Literal

Severity = Literal["info", "warning", "error"]

MSG_INVALID = "URL format is invalid, please check input"
MSG_USE_HTTPS = "Consider using HTTPS for security"
MSG_VALID = "URL format is valid"

URL_PATTERN = re.compile(
    r"(https?://)?[\w.-]+(:\d+)?[/\w .\-#?=&%]*",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class ValidationVerdict:
    """Result of validating one URL candidate."""
    acceptable: bool = False
    message: str = ""
    severity: Severity = "info"


def validate_url(text: str) -> ValidationVerdict:
    """Map candidate URL text to a verdict. Never raises."""
    if not text.strip():
        return ValidationVerdict()

    if not URL_PATTERN.fullmatch(text):
        return ValidationVerdict(False, MSG_INVALID, "error")

    if not text.startswith(("http://", "https://")):
        return ValidationVerdict(True, MSG_USE_HTTPS, "warning")

    # Plain http gets the same advice as a missing scheme
    if text.startswith("http://"):
        return ValidationVerdict(True, MSG_USE_HTTPS, "warning")

    return ValidationVerdict(True, MSG_VALID, "info")

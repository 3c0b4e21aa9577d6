"""Credential redaction for log lines and error messages.

Response bodies and request summaries can carry the bearer token, the login
password or the account email. Everything that may end up in a log file or
an exception message goes through sanitize_credentials() first.
"""

import re

REDACTED = "***REDACTED***"


def sanitize_credentials(text: str) -> str:
    """Mask credentials in the given text.

    Args:
        text: The error message or log text to sanitize

    Returns:
        str: Sanitized text with credentials masked

    Example:
        >>> sanitize_credentials('{"accessToken": "eyJhbGciOi"}')
        '{"accessToken": "***REDACTED***"}'
        >>> sanitize_credentials("login pesho@example.com")
        'login ***@example.com'
    """
    if not text:
        return text

    sanitized = text

    # URL userinfo first so the email rule below does not half-match it
    sanitized = re.sub(
        r'://([\w.-]+):([\w.-]+)@',
        r'://***:***@',
        sanitized
    )

    sanitized = re.sub(
        r'Authorization:\s*[^\n\r]+',
        f'Authorization: {REDACTED}',
        sanitized,
        flags=re.IGNORECASE
    )

    sanitized = re.sub(
        r'Bearer\s+[^\s"\'\n\r]+',
        f'Bearer {REDACTED}',
        sanitized,
        flags=re.IGNORECASE
    )

    # JSON style: "password": "xyz", "accessToken": "xyz"
    sanitized = re.sub(
        r'("(?:password|access_?token|token)"\s*:\s*)"[^"]*"',
        rf'\1"{REDACTED}"',
        sanitized,
        flags=re.IGNORECASE
    )

    # Form/query style: password=xyz, token=xyz
    sanitized = re.sub(
        r'\b(password|access_?token|token)=([^"\'\s&]+)',
        rf'\1={REDACTED}',
        sanitized,
        flags=re.IGNORECASE
    )

    sanitized = re.sub(
        r'\b[\w.+-]+@([\w-]+(?:\.[\w-]+)*\.[a-z]{2,})\b',
        r'***@\1',
        sanitized,
        flags=re.IGNORECASE
    )

    return sanitized

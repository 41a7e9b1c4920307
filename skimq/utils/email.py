"""
Sender address helpers.
"""

from __future__ import annotations


def extract_domain(sender_email: str | None) -> str:
    """
    Extract the lower-cased domain portion (after the last @) of a sender address.

    The value is taken verbatim: no trimming and no angle-bracket parsing, so
    the result is always a lower-cased substring of the input.

    Args:
        sender_email: Sender address string

    Returns:
        Domain portion, or "" when the address has no @

    Examples:
        >>> extract_domain("user@Example.COM")
        'example.com'

        >>> extract_domain("bounce+id@lists@mail.example.org")
        'mail.example.org'

        >>> extract_domain("not-an-email")
        ''
    """
    if not sender_email or "@" not in sender_email:
        return ""

    return sender_email.rsplit("@", 1)[1].lower()

"""
Security utilities for masking sensitive data in logs.

Provides functions to safely mask sensitive information like:
- Withdrawal destinations
- Access keys
"""


def mask_destination(destination: str | None) -> str:
    """
    Mask withdrawal destination for logging: bc1qxy...0wlh

    Short values are returned as-is so sentinel destinations stay
    readable in logs.

    Args:
        destination: Withdrawal destination

    Returns:
        Masked destination showing first 6 and last 4 characters

    Examples:
        >>> mask_destination("bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh")
        'bc1qxy...0wlh'
        >>> mask_destination("want_pending")
        'want_pending'
        >>> mask_destination(None)
        '***'
    """
    if not destination:
        return "***"
    if len(destination) <= 16:
        return destination
    return f"{destination[:6]}...{destination[-4:]}"


def mask_sensitive(value: str | None, show_chars: int = 4) -> str:
    """
    Mask a credential for logging.

    Args:
        value: Credential to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked value or '***' if too short

    Examples:
        >>> mask_sensitive("ak_live_1234567890", show_chars=4)
        'ak_l...7890'
        >>> mask_sensitive("abc")
        '***'
    """
    if not value or len(value) <= show_chars * 2:
        return "***"
    return f"{value[:show_chars]}...{value[-show_chars:]}"

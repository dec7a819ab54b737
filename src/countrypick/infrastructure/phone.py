"""Phone number digit helpers for country guessing and E.164 normalization."""

import phonenumbers


def dial_digits(raw: str | None) -> str:
    """Return only the digits of raw, as typed (no region inference).

    Full-width and other Unicode digits are mapped to ASCII.
    """
    if not raw or not str(raw).strip():
        return ""
    return phonenumbers.normalize_digits_only(str(raw))


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """Parse and return E.164 form of the number, or None if invalid.

    default_region is an ISO2 code in either case ("ua" or "UA"); it is used
    when the input has no leading +. If the number already includes a country
    code, default_region is ignored.
    """
    if not raw or not str(raw).strip():
        return None
    raw = str(raw).strip()
    region = default_region.upper() if default_region else None
    try:
        parsed = phonenumbers.parse(raw, region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)

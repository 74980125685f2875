import phonenumbers

from ..errors import ValidationError

TEL_SCHEME = "tel"


def tel_urn(number: str, country: str = "") -> str:
    """
    Normalize a phone number into an E.164 tel URN.

    Args:
        number: Phone number as sent by the provider, in international or
            local format
        country: ISO 3166 alpha-2 code used to read local-format numbers

    Returns:
        URN of the form ``tel:+<digits>``

    Raises:
        ValidationError: If the number can't be parsed or isn't a possible number
    """
    try:
        parsed = phonenumbers.parse(number or "", country.upper() or None)
    except phonenumbers.NumberParseException as e:
        raise ValidationError(f"invalid phone number: {number!r}") from e

    if not phonenumbers.is_possible_number(parsed):
        raise ValidationError(f"invalid phone number: {number!r}")

    e164 = phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
    return f"{TEL_SCHEME}:{e164}"


def urn_path(urn: str) -> str:
    """Return the path part of a URN (everything after the scheme)."""
    _, sep, path = urn.partition(":")
    return path if sep else urn

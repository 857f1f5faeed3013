import re
from typing import List, Optional

EMAIL_REGEX = re.compile(
    r"^(?!\.)(?!.*\.\.)[A-Za-z0-9!#$%&'*+/=?^_`{|}~.-]+(?<!\.)"
    r"@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$"
)

# Visual separators and dialling characters allowed inside tel: numbers.
PHONE_NOISE = re.compile(r'[\s\-().pwABCD*#]+', re.IGNORECASE)
PHONE_REGEX = re.compile(r'\+?\d{3,}')
MIN_PHONE_DIGITS = 10

INVALID_CSS_IDENTIFIER = re.compile(r'^(?:\d|--|-\d)')

SCALE_REGEX = re.compile(r'(maximum|minimum)-scale\s*=\s*([0-9.]+)')
SCALE_NUMBER = re.compile(r'\d*\.?\d*')


def is_valid_email(address: str) -> bool:
    if len(address) > 254:
        return False
    return EMAIL_REGEX.match(address) is not None


def mailto_addresses(href: str) -> List[str]:
    """Addresses of a `mailto:` href, query string dropped."""
    target = href[len("mailto:"):]
    target = target.split('?', 1)[0]
    return [address.strip() for address in target.split(',')]


def phone_number(href: str, scheme: str) -> str:
    """The number part of a tel:/fax:/modem: href, without parameters."""
    return href[len(scheme) + 1:].split(';', 1)[0]


def is_valid_phone(number: str) -> bool:
    cleaned = PHONE_NOISE.sub('', number)
    if not PHONE_REGEX.fullmatch(cleaned):
        return False
    return len(cleaned.lstrip('+')) >= MIN_PHONE_DIGITS


def is_invalid_css_identifier(value: str) -> bool:
    return bool(INVALID_CSS_IDENTIFIER.match(value))


def parse_scale(content: str, kind: str) -> Optional[str]:
    """The raw `maximum-scale` / `minimum-scale` value of a viewport content string."""
    for match in SCALE_REGEX.finditer(content):
        if match.group(1) == kind:
            return match.group(2)
    return None


def scale_value(raw: str) -> Optional[float]:
    """Leading numeric part of a scale value, so `1.0.0` reads as 1.0."""
    number = SCALE_NUMBER.match(raw).group()
    if number.strip('.') == '':
        return None
    return float(number)


def truncate(text: str, limit: int = 50) -> str:
    return text[:limit] + '...' if len(text) > limit else text

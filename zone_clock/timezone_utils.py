"""
Timezone identifier resolution.

Accepts canonical region names ("America/New_York"), legacy short aliases
("EST", "JST") and fixed-offset notations ("UTC+3", "GMT-05:00", "+0530", "Z").
"""

import re
from datetime import timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Legacy three-letter ids and the zone each one stands for.
SHORT_IDS = {
    'ACT': 'Australia/Darwin',
    'AET': 'Australia/Sydney',
    'AGT': 'America/Argentina/Buenos_Aires',
    'ART': 'Africa/Cairo',
    'AST': 'America/Anchorage',
    'BET': 'America/Sao_Paulo',
    'BST': 'Asia/Dhaka',
    'CAT': 'Africa/Harare',
    'CNT': 'America/St_Johns',
    'CST': 'America/Chicago',
    'CTT': 'Asia/Shanghai',
    'EAT': 'Africa/Addis_Ababa',
    'ECT': 'Europe/Paris',
    'IET': 'America/Indiana/Indianapolis',
    'IST': 'Asia/Kolkata',
    'JST': 'Asia/Tokyo',
    'MIT': 'Pacific/Apia',
    'NET': 'Asia/Yerevan',
    'NST': 'Pacific/Auckland',
    'PLT': 'Asia/Karachi',
    'PNT': 'America/Phoenix',
    'PRT': 'America/Puerto_Rico',
    'PST': 'America/Los_Angeles',
    'SST': 'Pacific/Guadalcanal',
    'VST': 'Asia/Ho_Chi_Minh',
    'EST': '-05:00',
    'MST': '-07:00',
    'HST': '-10:00',
}

OFFSET_PREFIXES = ('UTC', 'GMT', 'UT')
MAX_OFFSET = timedelta(hours=18)

# +h, +hh, +hh:mm, +hhmm, +hh:mm:ss, +hhmmss
_OFFSET_RE = re.compile(
    r'(?P<sign>[+-])'
    r'(?:(?P<short_hours>[0-9]{1,2})'
    r'|(?P<hours>[0-9]{2})(?P<colon>:?)(?P<minutes>[0-9]{2})(?:(?P=colon)(?P<seconds>[0-9]{2}))?)',
    re.ASCII,
)
_REGION_RE = re.compile(r'[A-Za-z][A-Za-z0-9~/._+-]+', re.ASCII)


class InvalidTimezoneError(ValueError):
    """Raised when an identifier does not name any known timezone."""

    def __init__(self, identifier: Optional[str], reason: str = 'unknown timezone'):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid timezone {identifier!r}: {reason}")


def normalize_timezone_param(value: Optional[str]) -> Optional[str]:
    """
    Undo form-encoding damage to offset notations.

    A literal '+' in a query string decodes to a space, so "UTC+3" arrives
    as "UTC 3". Empty values are returned unchanged.
    """
    if not value:
        return value
    return value.replace(' ', '+')


def offset_display_name(offset: timedelta) -> str:
    """Numeric abbreviation in tz database style: '+03', '-0930', '+053015'."""
    if not offset:
        return 'UTC'
    sign = '-' if offset < timedelta(0) else '+'
    total = abs(int(offset.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    name = f"{sign}{hours:02d}"
    if minutes or seconds:
        name += f"{minutes:02d}"
    if seconds:
        name += f"{seconds:02d}"
    return name


def parse_offset(text: str) -> timezone:
    """
    Parse a signed offset such as '+3', '-05:00', '+0530' or '+05:30:15'.

    Raises:
        InvalidTimezoneError: If the text is not a well-formed offset or lies
            outside +/-18:00.
    """
    match = _OFFSET_RE.fullmatch(text)
    if not match:
        raise InvalidTimezoneError(text, 'malformed offset')

    hours = int(match.group('short_hours') or match.group('hours'))
    minutes = int(match.group('minutes') or 0)
    seconds = int(match.group('seconds') or 0)
    if hours > 18 or minutes > 59 or seconds > 59:
        raise InvalidTimezoneError(text, 'offset out of range')

    offset = timedelta(hours=hours, minutes=minutes, seconds=seconds)
    if offset > MAX_OFFSET:
        raise InvalidTimezoneError(text, 'offset out of range')
    if match.group('sign') == '-':
        offset = -offset

    if not offset:
        return timezone.utc
    return timezone(offset, offset_display_name(offset))


def _resolve_prefixed_offset(identifier: str) -> Optional[tzinfo]:
    for prefix in OFFSET_PREFIXES:
        if not identifier.startswith(prefix):
            continue
        remainder = identifier[len(prefix):]
        if not remainder:
            return timezone.utc
        if remainder[0] in '+-':
            try:
                return parse_offset(remainder)
            except InvalidTimezoneError as e:
                raise InvalidTimezoneError(identifier, e.reason) from e
    return None


def resolve_timezone(identifier: Optional[str]) -> tzinfo:
    """
    Resolve a timezone identifier to a tzinfo.

    Args:
        identifier: Region name, short alias or fixed-offset notation

    Returns:
        A ZoneInfo for region names, a datetime.timezone for fixed offsets

    Raises:
        InvalidTimezoneError: If the identifier cannot be resolved
    """
    if not identifier:
        raise InvalidTimezoneError(identifier, 'empty identifier')

    identifier = SHORT_IDS.get(identifier, identifier)

    if identifier == 'Z':
        return timezone.utc
    if identifier[0] in '+-':
        return parse_offset(identifier)

    prefixed = _resolve_prefixed_offset(identifier)
    if prefixed is not None:
        return prefixed

    if not _REGION_RE.fullmatch(identifier):
        raise InvalidTimezoneError(identifier, 'malformed region id')

    try:
        return ZoneInfo(identifier)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezoneError(identifier) from e


def is_valid_timezone(identifier: Optional[str]) -> bool:
    """Return True if the identifier resolves to a timezone."""
    try:
        resolve_timezone(identifier)
    except InvalidTimezoneError:
        return False
    return True

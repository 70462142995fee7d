"""Current time formatting with an optional fixed UTC offset."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

log = logging.getLogger(__name__)

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)

# Composite directives expanded so output does not depend on the platform's strftime.
_COMPOSITES = {
    "T": "%H:%M:%S",
    "r": "%I:%M:%S %p",
    "R": "%H:%M",
    "D": "%m/%d/%y",
    "F": "%Y-%m-%d",
}


class InvalidOffsetError(ValueError):
    """The UTC offset is not a number of hours strictly between -24 and 24."""


def _expand(time_format: str) -> str:
    return _DIRECTIVE.sub(
        lambda match: _COMPOSITES.get(match.group(1), match.group(0)), time_format
    )


def format_time(time_format: str, moment: datetime) -> str:
    """Format `moment` with strftime-style directives."""
    return moment.strftime(_expand(time_format))


def _parse_hours(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise InvalidOffsetError("Invalid timezone offset.")
    try:
        return float(text)
    except ValueError:
        raise InvalidOffsetError("Invalid timezone offset.") from None


def create_offset_time_string(
    utc_time: datetime, utc_time_offset: str, time_format: str
) -> str:
    """Format `utc_time` shifted by `utc_time_offset` hours (fractions allowed).

    A naive `utc_time` is taken to be in UTC.
    """
    hours = _parse_hours(utc_time_offset)
    if not -24 < hours < 24:
        raise InvalidOffsetError("Invalid timezone offset.")

    offset = timezone(timedelta(seconds=int(hours * 3600)))
    log.debug("Target timezone offset is %s", offset)
    if utc_time.tzinfo is None:
        utc_time = utc_time.replace(tzinfo=timezone.utc)
    target = utc_time.astimezone(offset)
    log.debug("Time in target timezone now is %s", target)
    return format_time(time_format, target)


def current_time_string(time_format: str = "%T", utc_time_offset: str = "local") -> str:
    """The current time, at a fixed UTC offset or in local time.

    An invalid offset falls back to local time with a warning.
    """
    if utc_time_offset != "local":
        try:
            return create_offset_time_string(
                datetime.now(timezone.utc), utc_time_offset, time_format
            )
        except InvalidOffsetError:
            log.warning(
                'Invalid utc_time_offset configuration provided! Falling back to "local".'
            )
    return format_time(time_format, datetime.now().astimezone())
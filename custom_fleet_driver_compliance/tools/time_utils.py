# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

"""
Durées au format HH:MM:SS.

Les rapports de travail stockent la durée de travail et le temps de conduite
sous forme de texte saisi ou importé. Une valeur mal formée ne doit jamais
bloquer un tableau de bord: elle est lue comme une durée nulle.
"""

import math

DURATION_ZERO = '00:00:00'


def _to_number(part):
    """Read one component of a duration, None when it is not numeric."""
    text = part.strip()
    if not text:
        # "08::00" reads as 8 hours
        return 0
    if '_' in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def _duration_parts(value):
    if not value or not isinstance(value, str):
        return None
    parts = value.split(':')
    if len(parts) != 3:
        return None
    numbers = [_to_number(part) for part in parts]
    if any(number is None for number in numbers):
        return None
    return numbers


def parse_duration(value):
    """Convert a "HH:MM:SS" string into a number of seconds.

    Args:
        value: Duration text, usually "08:30:00"

    Returns:
        int|float: Seconds, 0 for anything that is not three numeric parts
    """
    parts = _duration_parts(value)
    if parts is None:
        return 0
    hours, minutes, seconds = parts
    return hours * 3600 + minutes * 60 + seconds


def hours_from_duration(value):
    """Same contract as parse_duration, in fractional hours."""
    parts = _duration_parts(value)
    if parts is None:
        return 0.0
    hours, minutes, seconds = parts
    return hours + minutes / 60 + seconds / 3600


def format_duration(total_seconds):
    """Format a number of seconds as a zero padded "HH:MM:SS".

    Each unit is floored, partial seconds are dropped. Hours are not wrapped
    at 24 so weekly subtotals stay readable ("41:15:00").

    Args:
        total_seconds: Seconds as int or float

    Returns:
        str: "HH:MM:SS", "00:00:00" when the input is not a finite number
    """
    if total_seconds is None or isinstance(total_seconds, bool):
        return DURATION_ZERO
    try:
        total_seconds = float(total_seconds)
    except (TypeError, ValueError):
        return DURATION_ZERO
    if not math.isfinite(total_seconds):
        return DURATION_ZERO

    hours = math.floor(total_seconds / 3600)
    minutes = math.floor((total_seconds % 3600) / 60)
    seconds = math.floor(total_seconds % 60)
    return '%02d:%02d:%02d' % (hours, minutes, seconds)

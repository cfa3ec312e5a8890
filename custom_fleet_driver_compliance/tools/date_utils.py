# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

"""
Répartition des enregistrements par mois, année et semaine.

Les dates arrivent soit comme objets date (ORM), soit comme texte importé
au format DD/MM/YYYY ou ISO. normalize_date renvoie None pour une date
illisible; l'appelant doit tester ce cas avant tout calcul.
"""

import logging
from datetime import date, datetime, timedelta

from dateutil.parser import isoparse
from dateutil.relativedelta import MO, relativedelta

from ..const import MONTH_NAMES, WEEKDAY_NAMES, YEAR_ALL

_logger = logging.getLogger(__name__)


def normalize_date(raw):
    """Read a date from an ORM value or a text cell.

    Args:
        raw: date, datetime, "DD/MM/YYYY" or ISO "YYYY-MM-DD[THH:MM:SS]"

    Returns:
        date|None: None when the value cannot be read
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not raw or not isinstance(raw, str):
        return None

    text = raw.strip()
    try:
        if '/' in text:
            parts = text.split('/')
            if len(parts) != 3:
                return None
            day, month, year = (int(part) for part in parts)
            return date(year, month, day)
        return isoparse(text).date()
    except (ValueError, OverflowError):
        _logger.debug("Date illisible ignorée: %r", raw)
        return None


def month_index(value):
    """0 for January, 11 for December."""
    return value.month - 1


def year_string(value):
    return '%04d' % value.year


def matches_year_filter(value, selected_year):
    """True when the filter is "all" or equals the year of the date."""
    if selected_year == YEAR_ALL:
        return True
    return year_string(value) == str(selected_year)


def iso_week_range(value):
    """Return the (monday, sunday) pair of the week holding the date."""
    start = value + relativedelta(weekday=MO(-1))
    return start, start + timedelta(days=6)


def week_key(value):
    return iso_week_range(value)[0].isoformat()


def month_range(year, month, today=None):
    """First and last day of the selected month.

    The year filter "all" resolves to the year of today.

    Args:
        year: "all" or "YYYY"
        month: 1-based month, int or string
        today: Reference date, defaults to the current day

    Returns:
        tuple: (first_day, last_day)
    """
    target = today or date.today()
    if year and year != YEAR_ALL:
        target += relativedelta(year=int(year))
    start = target + relativedelta(month=int(month), day=1)
    end = start + relativedelta(day=31)
    return start, end


def format_day_month(value):
    return '%02d %s' % (value.day, MONTH_NAMES[value.month - 1])


def format_week_label(start, end):
    """"Semaine du 04 mars au 10 mars 2024"."""
    return 'Semaine du %s au %s %d' % (format_day_month(start), format_day_month(end), end.year)


def weekday_label(value):
    return WEEKDAY_NAMES[value.weekday()]

# -*- coding: utf-8 -*-
"""Driver Compliance Reporting Service.

AbstractModel service computing every block of the compliance dashboard:
- Snapshot reading (search_read flattened to plain dicts)
- Label enrichment (driver, invariant, vehicle, partner)
- Monthly infraction counts and work/driving hour totals
- Infractions by type, top invariants, points lost per driver
- Weekly time sheet of a driver
- Paginated list pages (SCP rules, drivers, equipment)

The aggregation methods only read the snapshots they are given, they never
query the database and never raise on malformed data: unreadable dates are
left out, malformed durations count as zero and unknown references get a
fallback label.
"""
import logging
import math
from datetime import date

from odoo import api, fields, models

from ..const import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_RECENT_INFRACTIONS_LIMIT,
    DEFAULT_TOP_INVARIANTS_LIMIT,
    DEFAULT_WORK_TIME_FREQUENCY,
    DEFAULT_WORK_TIME_INVARIANT,
    FALLBACK_INVARIANT_LABEL,
    FALLBACK_LABEL,
    FALLBACK_PARTNER_LABEL,
    FILTER_ALL,
    INFRACTION_TYPE_ALARM,
    INFRACTION_TYPE_ALERT,
    MONTH_LABELS,
    PARAM_DEFAULT_PAGE_SIZE,
    PARAM_RECENT_INFRACTIONS_LIMIT,
    PARAM_TOP_INVARIANTS_LIMIT,
    PARAM_WORK_TIME_FREQUENCY,
    PARAM_WORK_TIME_INVARIANT,
    YEAR_ALL,
)
from ..models.fleet_compliance_objective import format_objective_target
from ..models.fleet_compliance_sanction_rule import sanction_key
from ..tools.date_utils import (
    format_week_label,
    iso_week_range,
    matches_year_filter,
    month_index,
    month_range,
    normalize_date,
)
from ..tools.pagination import paginate, total_pages
from ..tools.time_utils import format_duration, hours_from_duration, parse_duration

_logger = logging.getLogger(__name__)

DRIVER_FIELDS = ['name', 'first_name', 'full_name', 'partner_id']
INFRACTION_FIELDS = ['date', 'partner_id', 'report_id', 'driver_id', 'invariant_id', 'infraction_type', 'count']
REPORT_FIELDS = ['date', 'weekday', 'driver_id', 'partner_id', 'trip_start', 'trip_end', 'duration', 'driving_time']


def _contains(term, *values):
    return any(term in (value or '').lower() for value in values)


def _newest_first(records):
    """Sort records on their date, newest first, unreadable dates last."""
    dated = [(normalize_date(record.get('date')), record) for record in records]
    dated.sort(key=lambda item: (item[0] is not None, item[0] or date.min), reverse=True)
    return [record for __, record in dated]


class FleetComplianceReportingService(models.AbstractModel):
    """Service computing the compliance dashboard, time sheet and list pages.

    Usage:
        service = self.env["fleet.compliance.reporting.service"]
        data = service.get_dashboard_data(year="2024")
        weeks = service.get_weekly_time_sheet(driver_id=driver.id, year="2024", month="3")
        counts = service.monthly_infraction_counts(infractions, "2024")
    """

    _name = 'fleet.compliance.reporting.service'
    _description = 'Service de reporting conformité'

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------
    @api.model
    def _get_param(self, key, default):
        return self.env['ir.config_parameter'].sudo().get_param(key, default) or default

    @api.model
    def _get_int_param(self, key, default):
        value = self._get_param(key, default)
        try:
            value = int(value)
        except (TypeError, ValueError):
            _logger.warning("Paramètre %s invalide (%r), valeur par défaut %s utilisée", key, value, default)
            return default
        return value if value > 0 else default

    # -------------------------------------------------------------------------
    # SNAPSHOTS
    # -------------------------------------------------------------------------
    @api.model
    def read_snapshot(self, model_name, domain=None, field_names=None):
        """Read the records of a model as plain dicts.

        Many2one values are flattened to the raw id (or False) so the
        aggregation methods can join on ids.

        Args:
            model_name: Technical name of the model
            domain: Search domain (all records by default)
            field_names: Fields to read ("id" is always present)

        Returns:
            list: One dict per record
        """
        model = self.env[model_name]
        rows = model.search_read(domain or [], field_names or [])
        many2one_fields = [name for name, field in model._fields.items() if field.type == 'many2one']
        for row in rows:
            for name in many2one_fields:
                if name in row:
                    row[name] = row[name][0] if row[name] else False
        return rows

    # -------------------------------------------------------------------------
    # ENRICHMENT
    # -------------------------------------------------------------------------
    @api.model
    def _driver_label(self, driver):
        return driver.get('full_name') or ' '.join(
            part for part in (driver.get('first_name'), driver.get('name')) if part
        )

    @api.model
    def build_lookup(self, records, label):
        """Map record ids to a label.

        Args:
            records: List of dicts holding an "id" key
            label: Field name, or callable receiving the record

        Returns:
            dict: {id: label}
        """
        getter = label if callable(label) else (lambda record: record.get(label))
        return {record['id']: getter(record) for record in records or []}

    @api.model
    def enrich_with_driver_name(self, records, drivers):
        names = self.build_lookup(drivers, self._driver_label)
        return [
            dict(record, driver_name=names.get(record.get('driver_id')) or FALLBACK_LABEL)
            for record in records or []
        ]

    @api.model
    def enrich_with_invariant_title(self, records, invariants):
        titles = self.build_lookup(invariants, 'name')
        return [
            dict(record, invariant_title=titles.get(record.get('invariant_id')) or FALLBACK_INVARIANT_LABEL)
            for record in records or []
        ]

    @api.model
    def enrich_with_vehicle_label(self, records, vehicles):
        by_id = {vehicle['id']: vehicle for vehicle in vehicles or []}
        enriched = []
        for record in records or []:
            vehicle = by_id.get(record.get('vehicle_id')) or {}
            enriched.append(dict(
                record,
                vehicle_name=vehicle.get('name') or FALLBACK_LABEL,
                vehicle_registration=vehicle.get('license_plate') or FALLBACK_LABEL,
            ))
        return enriched

    @api.model
    def enrich_with_partner_name(self, records, partners):
        names = self.build_lookup(partners, 'name')
        return [
            dict(record, partner_name=names.get(record.get('partner_id')) or FALLBACK_PARTNER_LABEL)
            for record in records or []
        ]

    # -------------------------------------------------------------------------
    # AGGREGATIONS
    # -------------------------------------------------------------------------
    @api.model
    def _iter_in_year(self, records, year):
        """Yield (record, date) for the records dated within the year filter."""
        for record in records or []:
            record_date = normalize_date(record.get('date'))
            if record_date is None:
                _logger.debug("Enregistrement %s ignoré: date illisible %r", record.get('id'), record.get('date'))
                continue
            if matches_year_filter(record_date, year):
                yield record, record_date

    @api.model
    def monthly_infraction_counts(self, infractions, year):
        """Count infractions per month, January first.

        Returns:
            list: 12 integers
        """
        counts = [0] * 12
        for __, record_date in self._iter_in_year(infractions, year):
            counts[month_index(record_date)] += 1
        return counts

    @api.model
    def monthly_hour_totals(self, reports, year, field='duration'):
        """Sum the hours of a duration field per month, January first.

        Hours are accumulated at full precision and each month is rounded
        once at the end.

        Args:
            reports: Report snapshot
            year: "all" or "YYYY"
            field: "duration" or "driving_time"

        Returns:
            list: 12 integers
        """
        totals = [0.0] * 12
        for report, record_date in self._iter_in_year(reports, year):
            totals[month_index(record_date)] += hours_from_duration(report.get(field))
        # rounded half up
        return [int(math.floor(total + 0.5)) for total in totals]

    @api.model
    def infractions_by_type(self, infractions, year):
        counts = {INFRACTION_TYPE_ALERT: 0, INFRACTION_TYPE_ALARM: 0}
        for infraction, __ in self._iter_in_year(infractions, year):
            infraction_type = infraction.get('infraction_type')
            if infraction_type in counts:
                counts[infraction_type] += 1
        return counts

    @api.model
    def top_invariants_by_infraction_count(self, infractions, invariants, year, top_n=None):
        """Invariants with the most infractions, most frequent first.

        Returns:
            list: [{"invariant_id", "name", "total"}], at most top_n entries
        """
        if top_n is None:
            top_n = self._get_int_param(PARAM_TOP_INVARIANTS_LIMIT, DEFAULT_TOP_INVARIANTS_LIMIT)
        counts = {}
        for infraction, __ in self._iter_in_year(infractions, year):
            invariant_id = infraction.get('invariant_id')
            if not invariant_id:
                continue
            counts[invariant_id] = counts.get(invariant_id, 0) + 1

        titles = self.build_lookup(invariants, 'name')
        ranking = sorted(counts.items(), key=lambda item: -item[1])[:top_n]
        return [
            {
                'invariant_id': invariant_id,
                'name': titles.get(invariant_id) or FALLBACK_INVARIANT_LABEL,
                'total': total,
            }
            for invariant_id, total in ranking
        ]

    @api.model
    def points_lost_per_driver(self, infractions, sanction_rules, drivers, year):
        """Total SCP points lost by each driver, highest first.

        Each infraction costs the points of the rule matching its
        (invariant, type) pair, 0 when no rule matches. Infractions without
        driver are ignored and drivers at 0 points are left out.

        Returns:
            list: [{"driver_id", "name", "total"}]
        """
        points = {
            sanction_key(rule.get('invariant_id'), rule.get('infraction_type')): rule.get('points') or 0
            for rule in sanction_rules or []
        }
        totals = {}
        for infraction, __ in self._iter_in_year(infractions, year):
            driver_id = infraction.get('driver_id')
            if not driver_id:
                continue
            key = sanction_key(infraction.get('invariant_id'), infraction.get('infraction_type'))
            totals[driver_id] = totals.get(driver_id, 0) + points.get(key, 0)

        names = self.build_lookup(drivers, self._driver_label)
        result = [
            {
                'driver_id': driver_id,
                'name': names.get(driver_id) or 'Conducteur %s...' % str(driver_id)[:5],
                'total': total,
            }
            for driver_id, total in totals.items()
            if total > 0
        ]
        result.sort(key=lambda entry: -entry['total'])
        return result

    @api.model
    def recent_infractions(self, infractions, drivers, limit=None):
        if limit is None:
            limit = self._get_int_param(PARAM_RECENT_INFRACTIONS_LIMIT, DEFAULT_RECENT_INFRACTIONS_LIMIT)
        return self.enrich_with_driver_name(_newest_first(infractions or [])[:limit], drivers)

    @api.model
    def count_infractions_in_month(self, infractions, today=None):
        """Number of infractions dated in the month of today."""
        today = today or fields.Date.context_today(self)
        return sum(
            1 for __, record_date in self._iter_in_year(infractions, YEAR_ALL)
            if record_date.year == today.year and record_date.month == today.month
        )

    # -------------------------------------------------------------------------
    # WEEKLY TIME SHEET
    # -------------------------------------------------------------------------
    @api.model
    def _work_time_objective_label(self, objectives, invariants, partner_id, invariant_title, frequency):
        invariant = next((inv for inv in invariants or [] if inv.get('name') == invariant_title), None)
        if not invariant:
            return FALLBACK_LABEL
        for objective in objectives or []:
            if objective.get('invariant_id') != invariant['id'] or objective.get('frequency') != frequency:
                continue
            if partner_id and objective.get('partner_id') != partner_id:
                continue
            return format_objective_target(objective.get('target_value'), objective.get('unit')) or FALLBACK_LABEL
        return FALLBACK_LABEL

    @api.model
    def weekly_time_sheet(self, reports, driver_id, year, month, objectives, work_time_analyses, invariants,
                          partner_id=None, today=None, invariant_title=None, frequency=None):
        """Group the reports of a driver for one month by calendar week.

        Args:
            reports: Report snapshot
            driver_id: Driver whose reports are kept
            year: "all" (current year) or "YYYY"
            month: 1-based month, int or string
            objectives: Objective snapshot
            work_time_analyses: Work time analysis snapshot
            invariants: Invariant snapshot
            partner_id: Partner the objective must belong to (any when empty)
            today: Reference date used when year is "all"
            invariant_title: Invariant holding the daily objective
            frequency: Frequency of the daily objective

        Returns:
            list: Weeks ordered by the date of their first report, each
            {"week_key", "week_start", "week_end", "week_label", "reports",
            "subtotal_seconds", "subtotal"}
        """
        try:
            month_number = int(month)
            if not 1 <= month_number <= 12:
                return []
            month_start, month_end = month_range(year, month_number, today or fields.Date.context_today(self))
        except (TypeError, ValueError):
            _logger.debug("Feuille de temps: filtre invalide (année=%r, mois=%r)", year, month)
            return []

        objective_label = self._work_time_objective_label(
            objectives, invariants, partner_id,
            invariant_title or DEFAULT_WORK_TIME_INVARIANT,
            frequency or DEFAULT_WORK_TIME_FREQUENCY,
        )
        analyses = {analysis.get('report_id'): analysis for analysis in work_time_analyses or []}

        weeks = {}
        first_dates = {}
        for report in reports or []:
            if report.get('driver_id') != driver_id:
                continue
            report_date = normalize_date(report.get('date'))
            if report_date is None or not month_start <= report_date <= month_end:
                continue
            week_start, week_end = iso_week_range(report_date)
            key = week_start.isoformat()
            if key not in weeks:
                weeks[key] = {
                    'week_key': key,
                    'week_start': week_start,
                    'week_end': week_end,
                    'week_label': format_week_label(week_start, week_end),
                    'reports': [],
                    'subtotal_seconds': 0,
                }
                first_dates[key] = report_date
            week = weeks[key]
            week['reports'].append(dict(
                report,
                objective=objective_label,
                work_time_analysis=analyses.get(report.get('id')),
            ))
            week['subtotal_seconds'] += parse_duration(report.get('duration'))

        result = sorted(weeks.values(), key=lambda week: first_dates[week['week_key']])
        for week in result:
            week['subtotal'] = format_duration(week['subtotal_seconds'])
        return result

    @api.model
    def get_weekly_time_sheet(self, driver_id, year=YEAR_ALL, month=None, partner_id=None, today=None):
        """Weekly time sheet of a driver read from the database.

        Returns:
            list: See weekly_time_sheet, [] without active partner or driver
        """
        partner = self._resolve_partner(partner_id)
        if not partner or not driver_id:
            return []
        today = today or fields.Date.context_today(self)
        scope = [('partner_id', '=', partner.id)]

        reports = self.read_snapshot('fleet.compliance.report', scope + [('driver_id', '=', driver_id)], REPORT_FIELDS)
        objectives = self.read_snapshot(
            'fleet.compliance.objective', scope, ['invariant_id', 'partner_id', 'target_value', 'unit', 'frequency'],
        )
        analyses = self.read_snapshot(
            'fleet.compliance.work.time.analysis', scope, ['report_id', 'cause_analysis', 'action_taken', 'follow_up'],
        )
        invariants = self.read_snapshot('fleet.compliance.invariant', [], ['name'])

        return self.weekly_time_sheet(
            reports, driver_id, year, month or today.month, objectives, analyses, invariants,
            partner_id=partner.id,
            today=today,
            invariant_title=self._get_param(PARAM_WORK_TIME_INVARIANT, DEFAULT_WORK_TIME_INVARIANT),
            frequency=self._get_param(PARAM_WORK_TIME_FREQUENCY, DEFAULT_WORK_TIME_FREQUENCY),
        )

    # -------------------------------------------------------------------------
    # DASHBOARD
    # -------------------------------------------------------------------------
    @api.model
    def _resolve_partner(self, partner_id=None):
        Partner = self.env['fleet.compliance.partner']
        if partner_id:
            return Partner.browse(partner_id).exists()
        return Partner.get_active_partner()

    @api.model
    def _month_series(self, values):
        return [{'name': label, 'total': value} for label, value in zip(MONTH_LABELS, values)]

    @api.model
    def get_dashboard_data(self, year=YEAR_ALL, partner_id=None, today=None):
        """Compute every block of the compliance dashboard.

        Infractions, reports and SCP rules are scoped to the given partner,
        or to the active one. Without partner, infractions and reports are
        not filtered and no SCP rule applies.

        Args:
            year: "all" or "YYYY"
            partner_id: Partner to report on, the active partner by default
            today: Reference date of the "this month" counter

        Returns:
            dict: Counters and chart series
        """
        partner = self._resolve_partner(partner_id)
        today = today or fields.Date.context_today(self)
        scope = [('partner_id', '=', partner.id)] if partner else []

        partners = self.read_snapshot('fleet.compliance.partner', [], ['name', 'is_active'])
        drivers = self.read_snapshot('fleet.compliance.driver', [], DRIVER_FIELDS)
        invariants = self.read_snapshot('fleet.compliance.invariant', [], ['name'])
        infractions = self.read_snapshot('fleet.compliance.infraction', scope, INFRACTION_FIELDS)
        reports = self.read_snapshot('fleet.compliance.report', scope, REPORT_FIELDS)
        sanction_rules = self.read_snapshot(
            'fleet.compliance.sanction.rule', scope, ['invariant_id', 'infraction_type', 'points'],
        ) if partner else []
        _logger.debug(
            "Tableau de bord (année=%s, partenaire=%s): %s infractions, %s rapports, %s règles SCP",
            year, partner.id or None, len(infractions), len(reports), len(sanction_rules),
        )

        return {
            'year': year,
            'partner': {'id': partner.id, 'name': partner.name} if partner else False,
            'counters': {
                'partners': len(partners),
                'active_partners': sum(1 for partner_row in partners if partner_row['is_active']),
                'drivers': len(drivers),
                'vehicles': self.env['fleet.vehicle'].search_count([]),
                'infractions_this_month': self.count_infractions_in_month(infractions, today),
            },
            'monthly_work_hours': self._month_series(self.monthly_hour_totals(reports, year, 'duration')),
            'monthly_driving_hours': self._month_series(self.monthly_hour_totals(reports, year, 'driving_time')),
            'monthly_infractions': self._month_series(self.monthly_infraction_counts(infractions, year)),
            'infractions_by_type': self.infractions_by_type(infractions, year),
            'top_invariants': self.top_invariants_by_infraction_count(infractions, invariants, year),
            'points_lost_per_driver': self.points_lost_per_driver(infractions, sanction_rules, drivers, year),
            'recent_infractions': self.recent_infractions(infractions, drivers),
        }

    # -------------------------------------------------------------------------
    # LIST PAGES
    # -------------------------------------------------------------------------
    @api.model
    def _page(self, items, page=1, page_size=None):
        page_size = page_size or self._get_int_param(PARAM_DEFAULT_PAGE_SIZE, DEFAULT_PAGE_SIZE)
        page = page or 1
        return {
            'items': paginate(items, page, page_size),
            'page': page,
            'page_size': page_size,
            'total': len(items),
            'total_pages': total_pages(items, page_size),
        }

    @api.model
    def list_sanction_rules(self, partner_id=None, search='', page=1, page_size=None):
        """SCP rules of the partner with their invariant title, sorted by title."""
        partner = self._resolve_partner(partner_id)
        if not partner:
            return self._page([], page, page_size)
        rules = self.read_snapshot(
            'fleet.compliance.sanction.rule',
            [('partner_id', '=', partner.id)],
            ['partner_id', 'invariant_id', 'sanction', 'infraction_type', 'points'],
        )
        invariants = self.read_snapshot('fleet.compliance.invariant', [], ['name'])
        rows = self.enrich_with_invariant_title(rules, invariants)

        term = (search or '').strip().lower()
        if term:
            rows = [
                row for row in rows
                if _contains(term, row.get('sanction'), row['invariant_title'], row.get('infraction_type'))
            ]
        rows.sort(key=lambda row: row['invariant_title'].lower())
        return self._page(rows, page, page_size)

    @api.model
    def list_drivers(self, active_partner_id=None, partner_filter=FILTER_ALL, search='', page=1, page_size=None):
        """Drivers with their partner name.

        The active partner wins over the partner dropdown; the dropdown only
        applies when no partner is active.
        """
        if active_partner_id is None:
            active_partner_id = self.env['fleet.compliance.partner'].get_active_partner().id
        domain = []
        if active_partner_id:
            domain = [('partner_id', '=', active_partner_id)]
        elif partner_filter and partner_filter != FILTER_ALL:
            try:
                domain = [('partner_id', '=', int(partner_filter))]
            except (TypeError, ValueError):
                _logger.debug("Filtre partenaire invalide ignoré: %r", partner_filter)

        drivers = self.read_snapshot(
            'fleet.compliance.driver',
            domain,
            DRIVER_FIELDS + ['license_number', 'license_category', 'obc_key', 'work_location'],
        )
        partners = self.read_snapshot('fleet.compliance.partner', [], ['name'])
        rows = self.enrich_with_partner_name(drivers, partners)

        term = (search or '').strip().lower()
        if term:
            rows = [row for row in rows if _contains(term, self._driver_label(row))]
        return self._page(rows, page, page_size)

    @api.model
    def list_equipment(self, partner_id=None, year=YEAR_ALL, search='', page=1, page_size=None):
        """Equipment records of the partner, newest first."""
        partner = self._resolve_partner(partner_id)
        if not partner:
            return self._page([], page, page_size)
        equipment = self.read_snapshot(
            'fleet.compliance.equipment',
            [('partner_id', '=', partner.id)],
            ['date', 'vehicle_id', 'partner_id', 'has_beacon', 'has_camera', 'has_fatigue_detector'],
        )
        vehicles = self.read_snapshot('fleet.vehicle', [], ['name', 'license_plate'])
        rows = self.enrich_with_vehicle_label(equipment, vehicles)

        if year != YEAR_ALL:
            rows = [record for record, __ in self._iter_in_year(rows, year)]
        term = (search or '').strip().lower()
        if term:
            rows = [row for row in rows if _contains(term, row['vehicle_name'], row['vehicle_registration'])]
        return self._page(_newest_first(rows), page, page_size)

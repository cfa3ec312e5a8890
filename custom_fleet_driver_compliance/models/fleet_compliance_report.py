# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import api, fields, models

from ..tools.date_utils import weekday_label
from ..tools.time_utils import hours_from_duration, parse_duration


class FleetComplianceReport(models.Model):
    """
    Rapport de travail journalier d'un conducteur.

    Les durées sont conservées telles que saisies ou importées (HH:MM:SS);
    une valeur mal formée est lue comme une durée nulle dans les calculs.
    """
    _name = 'fleet.compliance.report'
    _description = 'Rapport de travail'
    _order = 'date desc, id desc'

    date = fields.Date(string='Date', required=True, default=fields.Date.context_today, index=True)
    weekday = fields.Char(string='Jour', compute='_compute_weekday', store=True, readonly=False)
    driver_id = fields.Many2one('fleet.compliance.driver', string='Conducteur', index=True, ondelete='set null')
    partner_id = fields.Many2one(
        'fleet.compliance.partner',
        string='Partenaire',
        index=True,
        ondelete='cascade',
        default=lambda self: self.env['fleet.compliance.partner'].get_active_partner(),
    )
    trip_start = fields.Char(string='Heure début trajet')
    trip_end = fields.Char(string='Heure fin trajet')
    duration = fields.Char(string='Temps de travail', help="Durée au format HH:MM:SS")
    driving_time = fields.Char(string='Temps de conduite', help="Durée au format HH:MM:SS")
    duration_seconds = fields.Integer(string='Temps de travail (s)', compute='_compute_duration_values', store=True)
    driving_hours = fields.Float(string='Heures de conduite', compute='_compute_duration_values', store=True)
    work_time_analysis_ids = fields.One2many('fleet.compliance.work.time.analysis', 'report_id', string='Analyses')
    work_time_analysis_id = fields.Many2one(
        'fleet.compliance.work.time.analysis',
        string='Analyse du temps de travail',
        compute='_compute_work_time_analysis_id',
    )
    infraction_ids = fields.One2many('fleet.compliance.infraction', 'report_id', string='Infractions')

    @api.depends('date')
    def _compute_weekday(self):
        for report in self:
            report.weekday = weekday_label(report.date) if report.date else False

    @api.depends('duration', 'driving_time')
    def _compute_duration_values(self):
        for report in self:
            report.duration_seconds = int(parse_duration(report.duration))
            report.driving_hours = hours_from_duration(report.driving_time)

    @api.depends('work_time_analysis_ids')
    def _compute_work_time_analysis_id(self):
        for report in self:
            report.work_time_analysis_id = report.work_time_analysis_ids[:1]

    @api.depends('date', 'driver_id.full_name')
    def _compute_display_name(self):
        for report in self:
            label = report.date.strftime('%d/%m/%Y') if report.date else ''
            if report.driver_id:
                label = '%s - %s' % (label, report.driver_id.full_name)
            report.display_name = label

# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import _, api, fields, models
from odoo.exceptions import ValidationError


class FleetComplianceWorkTimeAnalysis(models.Model):
    """Analyse cause / action / suivi d'un rapport dont le temps de travail dépasse l'objectif."""
    _name = 'fleet.compliance.work.time.analysis'
    _description = 'Analyse du temps de travail'
    _inherit = ['mail.thread']
    _rec_name = 'report_id'
    _order = 'report_date desc, id desc'

    report_id = fields.Many2one('fleet.compliance.report', string='Rapport', required=True, ondelete='cascade', index=True)
    partner_id = fields.Many2one(related='report_id.partner_id', store=True, index=True)
    driver_id = fields.Many2one(related='report_id.driver_id', store=True)
    report_date = fields.Date(related='report_id.date', store=True, string='Date du rapport')
    cause_analysis = fields.Char(string='Analyse de cause', required=True, tracking=True)
    action_taken = fields.Char(string='Action prise', required=True, tracking=True)
    follow_up = fields.Char(string='Suivi', required=True, tracking=True)

    @api.constrains('report_id')
    def _check_single_analysis_per_report(self):
        for analysis in self:
            duplicates = self.search_count([
                ('report_id', '=', analysis.report_id.id),
                ('id', '!=', analysis.id),
            ])
            if duplicates:
                raise ValidationError(_("Ce rapport possède déjà une analyse du temps de travail."))

# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import _, api, fields, models
from odoo.exceptions import ValidationError

from ..const import INFRACTION_TYPES
from .fleet_compliance_sanction_rule import sanction_key


class FleetComplianceInfraction(models.Model):
    """
    Infraction relevée sur un conducteur.

    Ajoute:
    - Rattachement au rapport de travail, au conducteur et à l'invariant
    - Mesures disciplinaires et suivi
    - Points perdus selon le barème SCP du partenaire
    """
    _name = 'fleet.compliance.infraction'
    _description = 'Infraction'
    _inherit = ['mail.thread', 'mail.activity.mixin']
    _order = 'date desc, id desc'

    # ========== IDENTIFICATION ==========

    date = fields.Date(string='Date', required=True, default=fields.Date.context_today, index=True, tracking=True)
    partner_id = fields.Many2one(
        'fleet.compliance.partner',
        string='Partenaire',
        index=True,
        ondelete='cascade',
        default=lambda self: self.env['fleet.compliance.partner'].get_active_partner(),
    )
    report_id = fields.Many2one('fleet.compliance.report', string='Rapport', ondelete='set null')
    driver_id = fields.Many2one('fleet.compliance.driver', string='Conducteur', index=True, tracking=True)
    invariant_id = fields.Many2one('fleet.compliance.invariant', string='Invariant', index=True, tracking=True)
    infraction_type = fields.Selection(INFRACTION_TYPES, string="Type d'infraction", required=True, tracking=True)
    count = fields.Integer(string='Nombre', default=1)

    # ========== MESURES & SUIVI ==========

    disciplinary_measure = fields.Char(string='Mesure disciplinaire', tracking=True)
    other_measures = fields.Char(string='Autres mesures disciplinaires')
    follow_up_required = fields.Boolean(string='Suivi')
    improvement_noted = fields.Boolean(string='Amélioration')
    follow_up_date = fields.Date(string='Date de suivi')

    points_lost = fields.Integer(string='Points perdus', compute='_compute_points_lost')

    @api.depends('partner_id', 'invariant_id', 'infraction_type')
    def _compute_points_lost(self):
        rules = self.env['fleet.compliance.sanction.rule'].search([
            ('partner_id', 'in', self.partner_id.ids),
        ])
        points_by_key = {
            (rule.partner_id.id, sanction_key(rule.invariant_id.id, rule.infraction_type)): rule.points
            for rule in rules
        }
        for infraction in self:
            key = sanction_key(infraction.invariant_id.id, infraction.infraction_type)
            infraction.points_lost = points_by_key.get((infraction.partner_id.id, key), 0)

    @api.constrains('count')
    def _check_count(self):
        for infraction in self:
            if infraction.count < 0:
                raise ValidationError(_("Le nombre d'infractions ne peut pas être négatif."))

    @api.constrains('follow_up_date', 'date')
    def _check_follow_up_date(self):
        for infraction in self:
            if infraction.follow_up_date and infraction.date and infraction.follow_up_date < infraction.date:
                raise ValidationError(_("La date de suivi ne peut pas précéder la date de l'infraction."))

    @api.onchange('report_id')
    def _onchange_report_id(self):
        if self.report_id:
            self.date = self.report_id.date
            if self.report_id.driver_id:
                self.driver_id = self.report_id.driver_id

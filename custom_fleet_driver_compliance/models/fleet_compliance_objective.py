# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import api, fields, models

from ..const import OBJECTIVE_FREQUENCIES


def format_objective_target(target_value, unit):
    """"9 h" for a target of 9.0 hours, the decimals are kept when needed."""
    if target_value is None or target_value is False:
        return False
    number = int(target_value) if float(target_value).is_integer() else target_value
    return ' '.join(str(part) for part in (number, unit) if part not in (None, False, ''))


class FleetComplianceObjective(models.Model):
    _name = 'fleet.compliance.objective'
    _description = 'Objectif de conformité'
    _order = 'invariant_id, frequency'

    invariant_id = fields.Many2one('fleet.compliance.invariant', string='Invariant', required=True, ondelete='cascade')
    partner_id = fields.Many2one(
        'fleet.compliance.partner',
        string='Partenaire',
        index=True,
        ondelete='cascade',
        default=lambda self: self.env['fleet.compliance.partner'].get_active_partner(),
    )
    target_value = fields.Float(string='Cible', required=True)
    unit = fields.Char(string='Unité', help="Unité de la cible, par exemple « h » ou « km/h »")
    chapter = fields.Char(string='Chapitre')
    frequency = fields.Selection(OBJECTIVE_FREQUENCIES, string='Fréquence', required=True, default='Journalier')
    target_label = fields.Char(string='Objectif', compute='_compute_target_label')

    @api.depends('target_value', 'unit')
    def _compute_target_label(self):
        for objective in self:
            objective.target_label = format_objective_target(objective.target_value, objective.unit)

# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import _, api, fields, models
from odoo.exceptions import ValidationError

from ..const import INFRACTION_TYPES


def sanction_key(invariant_id, infraction_type):
    """Lookup key shared by the rules and the infractions they price."""
    return ('%s-%s' % (invariant_id, infraction_type)).lower()


class FleetComplianceSanctionRule(models.Model):
    """
    Barème SCP: nombre de points retirés pour un couple (invariant, type).

    Une infraction sans règle correspondante ne coûte aucun point.
    """
    _name = 'fleet.compliance.sanction.rule'
    _description = 'Règle de sanction (SCP)'
    _inherit = ['mail.thread']
    _order = 'invariant_id, infraction_type'

    partner_id = fields.Many2one(
        'fleet.compliance.partner',
        string='Partenaire',
        required=True,
        index=True,
        ondelete='cascade',
        default=lambda self: self.env['fleet.compliance.partner'].get_active_partner(),
    )
    invariant_id = fields.Many2one('fleet.compliance.invariant', string='Invariant', required=True, tracking=True)
    sanction = fields.Char(string='Sanction', required=True, tracking=True)
    infraction_type = fields.Selection(INFRACTION_TYPES, string="Type d'infraction", required=True, default='Alerte')
    points = fields.Integer(string='Points', default=1, tracking=True)

    _sql_constraints = [
        (
            'fleet_compliance_sanction_rule_unique',
            'unique(partner_id, invariant_id, infraction_type)',
            'Une règle existe déjà pour cet invariant et ce type.',
        ),
    ]

    @api.constrains('points')
    def _check_points(self):
        for rule in self:
            if rule.points < 0:
                raise ValidationError(_("Le nombre de points d'une sanction ne peut pas être négatif."))

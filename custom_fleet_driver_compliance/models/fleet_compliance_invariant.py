# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import fields, models


class FleetComplianceInvariant(models.Model):
    """Catégorie de règle (vitesse, temps de repos...) à laquelle on rattache les infractions."""
    _name = 'fleet.compliance.invariant'
    _description = 'Invariant de conformité'
    _order = 'name'

    name = fields.Char(string='Titre', required=True)
    description = fields.Text(string='Description')
    active = fields.Boolean(default=True)
    objective_ids = fields.One2many('fleet.compliance.objective', 'invariant_id', string='Objectifs')
    sanction_rule_ids = fields.One2many('fleet.compliance.sanction.rule', 'invariant_id', string='Barème SCP')
    infraction_count = fields.Integer(string="Nombre d'infractions", compute='_compute_infraction_count')

    _sql_constraints = [
        ('fleet_compliance_invariant_name_unique', 'unique(name)', 'Un invariant porte déjà ce titre.'),
    ]

    def _compute_infraction_count(self):
        counts = {
            invariant.id: count
            for invariant, count in self.env['fleet.compliance.infraction']._read_group(
                [('invariant_id', 'in', self.ids)], ['invariant_id'], ['__count'],
            )
        }
        for invariant in self:
            invariant.infraction_count = counts.get(invariant.id, 0)

# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import api, fields, models


class FleetComplianceEquipment(models.Model):
    """Relevé des équipements embarqués d'un véhicule à une date donnée."""
    _name = 'fleet.compliance.equipment'
    _description = 'Équipement véhicule'
    _order = 'date desc, id desc'

    date = fields.Date(string='Date', required=True, default=fields.Date.context_today)
    vehicle_id = fields.Many2one('fleet.vehicle', string='Véhicule', required=True, ondelete='cascade', index=True)
    partner_id = fields.Many2one(
        'fleet.compliance.partner',
        string='Partenaire',
        index=True,
        ondelete='cascade',
        default=lambda self: self.env['fleet.compliance.partner'].get_active_partner(),
    )
    has_beacon = fields.Boolean(string='Balise')
    has_camera = fields.Boolean(string='Caméra')
    has_fatigue_detector = fields.Boolean(string='Détecteur de fatigue')
    is_fully_equipped = fields.Boolean(string='Équipement complet', compute='_compute_is_fully_equipped', store=True)

    @api.depends('has_beacon', 'has_camera', 'has_fatigue_detector')
    def _compute_is_fully_equipped(self):
        for equipment in self:
            equipment.is_fully_equipped = equipment.has_beacon and equipment.has_camera and equipment.has_fatigue_detector

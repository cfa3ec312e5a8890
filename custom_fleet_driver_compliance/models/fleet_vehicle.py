# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import api, fields, models


class FleetVehicle(models.Model):
    """
    Extension du modèle fleet.vehicle pour le suivi de conformité.

    Ajoute:
    - Partenaire client auquel le véhicule est affecté
    - Libellé « nom (immatriculation) » utilisé dans les listes d'équipements
    """
    _inherit = 'fleet.vehicle'

    compliance_partner_id = fields.Many2one(
        'fleet.compliance.partner',
        string='Partenaire conformité',
        index=True,
        ondelete='set null',
        default=lambda self: self.env['fleet.compliance.partner'].get_active_partner(),
    )
    compliance_equipment_ids = fields.One2many('fleet.compliance.equipment', 'vehicle_id', string='Équipements')
    compliance_label = fields.Char(string='Libellé conformité', compute='_compute_compliance_label')

    @api.depends('name', 'license_plate')
    def _compute_compliance_label(self):
        for vehicle in self:
            if vehicle.license_plate:
                vehicle.compliance_label = '%s (%s)' % (vehicle.name or '', vehicle.license_plate)
            else:
                vehicle.compliance_label = vehicle.name or ''

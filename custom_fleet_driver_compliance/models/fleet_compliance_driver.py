# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

from odoo import api, fields, models


class FleetComplianceDriver(models.Model):
    _name = 'fleet.compliance.driver'
    _description = 'Conducteur'
    _inherit = ['mail.thread']
    _order = 'first_name, name'
    _rec_name = 'full_name'

    name = fields.Char(string='Nom', required=True, tracking=True)
    first_name = fields.Char(string='Prénom', required=True, tracking=True)
    full_name = fields.Char(string='Nom complet', compute='_compute_full_name', store=True)
    license_number = fields.Char(string='Numéro de permis', tracking=True)
    license_category = fields.Char(string='Catégorie de permis')
    obc_key = fields.Char(string='Clé OBC', index=True, help="Identifiant du conducteur dans le boîtier télématique")
    work_location = fields.Char(string='Lieu de travail')
    partner_id = fields.Many2one(
        'fleet.compliance.partner',
        string='Partenaire',
        index=True,
        tracking=True,
        ondelete='set null',
        default=lambda self: self.env['fleet.compliance.partner'].get_active_partner(),
    )
    infraction_ids = fields.One2many('fleet.compliance.infraction', 'driver_id', string='Infractions')
    report_ids = fields.One2many('fleet.compliance.report', 'driver_id', string='Rapports')
    infraction_count = fields.Integer(string="Nombre d'infractions", compute='_compute_infraction_stats')
    points_lost_total = fields.Integer(string='Points perdus', compute='_compute_infraction_stats')

    @api.depends('first_name', 'name')
    def _compute_full_name(self):
        for driver in self:
            driver.full_name = ' '.join(part for part in (driver.first_name, driver.name) if part)

    @api.depends('infraction_ids.points_lost')
    def _compute_infraction_stats(self):
        for driver in self:
            driver.infraction_count = len(driver.infraction_ids)
            driver.points_lost_total = sum(driver.infraction_ids.mapped('points_lost'))

# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

import logging

from odoo import _, api, fields, models
from odoo.exceptions import ValidationError

_logger = logging.getLogger(__name__)


class FleetCompliancePartner(models.Model):
    """
    Partenaire client dont on suit la conformité des conducteurs.

    Un seul partenaire est actif à la fois (par société): les tableaux de
    bord, les listes et les formulaires travaillent sur ses données.
    """
    _name = 'fleet.compliance.partner'
    _description = 'Partenaire conformité'
    _inherit = ['mail.thread']
    _order = 'is_active desc, name'

    name = fields.Char(string='Nom', required=True, tracking=True)
    is_active = fields.Boolean(
        string='Partenaire actif',
        default=False,
        copy=False,
        index=True,
        tracking=True,
        help="Partenaire sur lequel portent le tableau de bord et les saisies. Un seul partenaire actif à la fois."
    )
    company_id = fields.Many2one(
        'res.company',
        string='Société',
        required=True,
        default=lambda self: self.env.company,
    )
    note = fields.Text(string='Notes')
    driver_ids = fields.One2many('fleet.compliance.driver', 'partner_id', string='Conducteurs')
    driver_count = fields.Integer(string='Nombre de conducteurs', compute='_compute_driver_count')

    _sql_constraints = [
        ('fleet_compliance_partner_name_unique', 'unique(name, company_id)', 'Ce partenaire existe déjà.'),
    ]

    @api.depends('driver_ids')
    def _compute_driver_count(self):
        for partner in self:
            partner.driver_count = len(partner.driver_ids)

    @api.constrains('is_active', 'company_id')
    def _check_single_active_partner(self):
        for partner in self.filtered('is_active'):
            others = self.search_count([
                ('id', '!=', partner.id),
                ('is_active', '=', True),
                ('company_id', '=', partner.company_id.id),
            ])
            if others:
                raise ValidationError(_("Un seul partenaire peut être actif à la fois. Utilisez le bouton « Activer »."))

    # ========== ACTIONS ==========

    def action_activate(self):
        """Make this partner the active one and deactivate the others."""
        self.ensure_one()
        others = self.search([
            ('id', '!=', self.id),
            ('is_active', '=', True),
            ('company_id', '=', self.company_id.id),
        ])
        if others:
            others.write({'is_active': False})
        self.is_active = True
        _logger.info("Partenaire actif: %s (id=%s)", self.name, self.id)
        return True

    def action_deactivate(self):
        self.write({'is_active': False})
        return True

    @api.model
    def get_active_partner(self):
        """Return the active partner of the current company, or an empty recordset."""
        return self.search([
            ('is_active', '=', True),
            ('company_id', '=', self.env.company.id),
        ], limit=1)

# -*- coding: utf-8 -*-
"""Driver compliance - Configuration Settings.

Configuration Parameters stored in ir.config_parameter:
- fleet_compliance.work_time_invariant_title: Invariant holding the daily work time objective
- fleet_compliance.work_time_frequency: Frequency of that objective
- fleet_compliance.top_invariants_limit: Size of the "top invariants" chart
- fleet_compliance.recent_infractions_limit: Size of the "recent infractions" list
- fleet_compliance.default_page_size: Default page size of the list views
"""
from odoo import _, api, fields, models
from odoo.exceptions import ValidationError

from ..const import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_RECENT_INFRACTIONS_LIMIT,
    DEFAULT_TOP_INVARIANTS_LIMIT,
    DEFAULT_WORK_TIME_FREQUENCY,
    DEFAULT_WORK_TIME_INVARIANT,
    OBJECTIVE_FREQUENCIES,
    PAGE_SIZE_OPTIONS,
    PARAM_DEFAULT_PAGE_SIZE,
    PARAM_RECENT_INFRACTIONS_LIMIT,
    PARAM_TOP_INVARIANTS_LIMIT,
    PARAM_WORK_TIME_FREQUENCY,
    PARAM_WORK_TIME_INVARIANT,
)


class ResConfigSettings(models.TransientModel):
    """Driver compliance configuration settings."""

    _inherit = 'res.config.settings'

    # -------------------------------------------------------------------------
    # WEEKLY TIME SHEET
    # -------------------------------------------------------------------------
    fleet_compliance_work_time_invariant = fields.Char(
        string='Invariant temps de travail',
        default=DEFAULT_WORK_TIME_INVARIANT,
        config_parameter=PARAM_WORK_TIME_INVARIANT,
        help="Titre de l'invariant dont l'objectif est affiché dans la feuille de temps hebdomadaire",
    )
    fleet_compliance_work_time_frequency = fields.Selection(
        OBJECTIVE_FREQUENCIES,
        string='Fréquence de l\'objectif',
        default=DEFAULT_WORK_TIME_FREQUENCY,
        config_parameter=PARAM_WORK_TIME_FREQUENCY,
    )

    # -------------------------------------------------------------------------
    # DASHBOARD & LISTS
    # -------------------------------------------------------------------------
    fleet_compliance_top_invariants_limit = fields.Integer(
        string='Nombre d\'invariants affichés',
        default=DEFAULT_TOP_INVARIANTS_LIMIT,
        config_parameter=PARAM_TOP_INVARIANTS_LIMIT,
    )
    fleet_compliance_recent_infractions_limit = fields.Integer(
        string='Nombre d\'infractions récentes',
        default=DEFAULT_RECENT_INFRACTIONS_LIMIT,
        config_parameter=PARAM_RECENT_INFRACTIONS_LIMIT,
    )
    fleet_compliance_default_page_size = fields.Integer(
        string='Taille de page par défaut',
        default=DEFAULT_PAGE_SIZE,
        config_parameter=PARAM_DEFAULT_PAGE_SIZE,
        help="Nombre de lignes par page dans les listes (%s)" % ', '.join(str(size) for size in PAGE_SIZE_OPTIONS),
    )

    @api.constrains(
        'fleet_compliance_top_invariants_limit',
        'fleet_compliance_recent_infractions_limit',
        'fleet_compliance_default_page_size',
    )
    def _check_fleet_compliance_limits(self):
        for record in self:
            limits = (
                record.fleet_compliance_top_invariants_limit,
                record.fleet_compliance_recent_infractions_limit,
                record.fleet_compliance_default_page_size,
            )
            if any(limit <= 0 for limit in limits):
                raise ValidationError(_("Les limites d'affichage doivent être strictement positives."))

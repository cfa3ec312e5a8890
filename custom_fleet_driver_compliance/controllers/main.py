# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

import logging

from odoo import fields, http
from odoo.http import request

from ..const import DASHBOARD_URL, TIME_SHEET_URL, YEAR_ALL

_logger = logging.getLogger(__name__)


class FleetComplianceController(http.Controller):

    @http.route(DASHBOARD_URL, type='json', auth='user')
    def dashboard(self, year=YEAR_ALL, **kwargs):
        """Every block of the compliance dashboard for the active partner."""
        _logger.debug("Tableau de bord demandé (année=%s)", year)
        return request.env['fleet.compliance.reporting.service'].get_dashboard_data(year=year or YEAR_ALL)

    @http.route(TIME_SHEET_URL, type='json', auth='user')
    def time_sheet(self, driver_id=None, year=YEAR_ALL, month=None, **kwargs):
        """Weekly time sheet of a driver for one month of the active partner."""
        if not driver_id:
            return []
        month = month or fields.Date.context_today(request.env.user).month
        return request.env['fleet.compliance.reporting.service'].get_weekly_time_sheet(
            int(driver_id), year=year or YEAR_ALL, month=month,
        )

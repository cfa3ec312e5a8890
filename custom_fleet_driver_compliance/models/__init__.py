# -*- coding: utf-8 -*-

from . import (
    fleet_compliance_partner,
    fleet_compliance_driver,
    fleet_compliance_invariant,
    fleet_compliance_objective,
    fleet_compliance_sanction_rule,
    fleet_compliance_report,
    fleet_compliance_infraction,
    fleet_compliance_work_time_analysis,
    fleet_compliance_equipment,
    fleet_vehicle,
    res_config_settings,
)

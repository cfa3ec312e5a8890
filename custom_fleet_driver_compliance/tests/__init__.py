# -*- coding: utf-8 -*-

from . import (
    test_time_utils,
    test_date_utils,
    test_pagination,
    test_reporting_aggregators,
    test_weekly_time_sheet,
    test_dashboard,
    test_compliance_models,
    test_record_service,
    test_report_import,
)

# -*- coding: utf-8 -*-

from . import report_import_wizard

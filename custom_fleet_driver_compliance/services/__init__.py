# -*- coding: utf-8 -*-

from . import compliance_record, compliance_reporting

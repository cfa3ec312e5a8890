# -*- coding: utf-8 -*-

from . import date_utils, pagination, time_utils

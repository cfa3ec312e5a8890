# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

""" Driver compliance constants """

# Infraction tags as delivered by the telematics exports
INFRACTION_TYPE_ALERT = 'Alerte'
INFRACTION_TYPE_ALARM = 'Alarme'
INFRACTION_TYPES = [
    (INFRACTION_TYPE_ALERT, 'Alerte'),
    (INFRACTION_TYPE_ALARM, 'Alarme'),
]

OBJECTIVE_FREQUENCIES = [
    ('Journalier', 'Journalier'),
    ('Hebdomadaire', 'Hebdomadaire'),
    ('Mensuel', 'Mensuel'),
    ('Annuel', 'Annuel'),
]

# Filter value meaning "no filter" (year and partner dropdowns)
FILTER_ALL = 'all'
YEAR_ALL = FILTER_ALL

# Labels substituted when a reference cannot be resolved
FALLBACK_INVARIANT_LABEL = 'Invariant inconnu'
FALLBACK_PARTNER_LABEL = 'Non assigné'
FALLBACK_LABEL = 'N/A'

MONTH_LABELS = ['Jan', 'Fév', 'Mar', 'Avr', 'Mai', 'Juin', 'Juil', 'Aoû', 'Sep', 'Oct', 'Nov', 'Déc']
MONTH_NAMES = [
    'janvier', 'février', 'mars', 'avril', 'mai', 'juin',
    'juillet', 'août', 'septembre', 'octobre', 'novembre', 'décembre',
]
WEEKDAY_NAMES = ['Lundi', 'Mardi', 'Mercredi', 'Jeudi', 'Vendredi', 'Samedi', 'Dimanche']

# Configuration parameters (ir.config_parameter)
PARAM_WORK_TIME_INVARIANT = 'fleet_compliance.work_time_invariant_title'
PARAM_WORK_TIME_FREQUENCY = 'fleet_compliance.work_time_frequency'
PARAM_TOP_INVARIANTS_LIMIT = 'fleet_compliance.top_invariants_limit'
PARAM_RECENT_INFRACTIONS_LIMIT = 'fleet_compliance.recent_infractions_limit'
PARAM_DEFAULT_PAGE_SIZE = 'fleet_compliance.default_page_size'

DEFAULT_WORK_TIME_INVARIANT = 'Temps de travail journalier'
DEFAULT_WORK_TIME_FREQUENCY = 'Journalier'
DEFAULT_TOP_INVARIANTS_LIMIT = 5
DEFAULT_RECENT_INFRACTIONS_LIMIT = 5
DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = [5, 10, 20, 30, 40, 50]

# Controller URLs
DASHBOARD_URL = '/fleet_compliance/dashboard'
TIME_SHEET_URL = '/fleet_compliance/time_sheet'

# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

"""
Module: Conformité Conducteurs
==============================

Suivi des infractions, du barème de points SCP et des temps de travail des
conducteurs pour le partenaire actif.

Organisation:
- models: données persistées (partenaires, conducteurs, infractions, rapports...)
- tools: fonctions pures (durées, dates, pagination)
- services: agrégations du tableau de bord et écritures avec résultat explicite
- wizards: import des rapports de travail
- controllers: routes JSON du tableau de bord
"""

from . import controllers, models, services, wizards

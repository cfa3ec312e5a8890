# -*- coding: utf-8 -*-
# Part of SCORE Logistics Suite. See LICENSE file for full copyright and licensing details.

{
    'name': 'SCORE - Conformité Conducteurs',
    'version': '19.0.1.0.0',
    'category': 'Operations/Fleet',
    'sequence': 110,
    'summary': 'Partenaires, conducteurs, infractions, points SCP et analyse des temps de travail',
    'description': """
Conformité Conducteurs
======================

Suivi de la conformité des conducteurs par partenaire client.

Fonctionnalités:
- Partenaires avec un seul partenaire actif à la fois
- Conducteurs, véhicules et équipements embarqués (balise, caméra, détecteur de fatigue)
- Invariants (catégories de règles) et objectifs par partenaire
- Infractions (Alerte / Alarme) et barème de points SCP
- Rapports de travail journaliers et analyses cause / action / suivi
- Tableau de bord: infractions mensuelles, heures de travail et de conduite,
  top invariants, répartition par type, points perdus par conducteur
- Feuille de temps hebdomadaire par conducteur
- Import des rapports depuis un fichier CSV ou Excel
    """,
    'author': 'SCORE',
    'website': '',
    'license': 'LGPL-3',
    'depends': [
        'base',
        'mail',
        'fleet',
    ],
    'external_dependencies': {
        'python': ['dateutil', 'openpyxl'],
    },
    'data': [
        # Sécurité
        'security/ir.model.access.csv',
        # Données de base
        'data/fleet_compliance_invariants.xml',
    ],
    'installable': True,
    'application': False,
    'auto_install': False,
}

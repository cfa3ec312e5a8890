# -*- coding: utf-8 -*-
"""Tests for the work report import wizard (CSV and XLSX)."""
import base64
from datetime import date, datetime
from io import BytesIO

import openpyxl

from odoo.exceptions import UserError, ValidationError
from odoo.tests import TransactionCase, tagged


@tagged('post_install', '-at_install', 'fleet_compliance')
class TestReportImport(TransactionCase):

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.partner = cls.env['fleet.compliance.partner'].create({'name': 'Partenaire Import'})
        cls.driver = cls.env['fleet.compliance.driver'].create({
            'name': 'Coulibaly', 'first_name': 'Seydou', 'obc_key': 'OBC-42', 'partner_id': cls.partner.id,
        })
        cls.Report = cls.env['fleet.compliance.report']

    def _wizard(self, content, filename='rapports.csv'):
        return self.env['fleet.compliance.report.import.wizard'].create({
            'data_file': base64.b64encode(content),
            'filename': filename,
            'partner_id': self.partner.id,
        })

    def test_01_import_csv(self):
        content = (
            "Date,Jour,Conducteur,Heure_Debut_Trajet,Heure_Fin_Trajet,Duree,Temps_Conduite\n"
            "04/03/2024,,OBC-42,06:00,14:30,08:30:00,06:10:00\n"
            "2024-03-05,Mardi,seydou coulibaly,06:15,14:00,07:45:30,05:50:00\n"
            "pas une date,,OBC-42,,,08:00:00,\n"
            "2024-03-06,,Inconnu,,,09:00:00,\n"
        ).encode('utf-8')
        action = self._wizard(content).action_import()
        self.assertEqual(action['tag'], 'display_notification')
        self.assertEqual(action['params']['type'], 'warning')

        reports = self.Report.search([('partner_id', '=', self.partner.id)], order='date')
        self.assertEqual(len(reports), 3)
        first, second, third = reports
        self.assertEqual(first.date, date(2024, 3, 4))
        self.assertEqual(first.weekday, 'Lundi')
        self.assertEqual(first.driver_id, self.driver)
        self.assertEqual(first.trip_start, '06:00')
        self.assertEqual(first.duration_seconds, 30600)
        self.assertEqual(second.driver_id, self.driver, "Drivers are also matched on their full name")
        self.assertEqual(second.driving_time, '05:50:00')
        self.assertFalse(third.driver_id, "Unknown drivers import without driver")

    def test_02_import_xlsx(self):
        workbook = openpyxl.Workbook()
        sheet = workbook.active
        sheet.append(['date', 'conducteur', 'duree', 'temps_conduite'])
        sheet.append([datetime(2024, 3, 11), 'OBC-42', '09:15:00', '07:00:00'])
        sheet.append(['12/03/2024', 'OBC-42', '08:00:00', None])
        stream = BytesIO()
        workbook.save(stream)

        action = self._wizard(stream.getvalue(), filename='rapports.xlsx').action_import()
        self.assertEqual(action['params']['type'], 'success')
        reports = self.Report.search([('partner_id', '=', self.partner.id)], order='date')
        self.assertEqual(reports.mapped('date'), [date(2024, 3, 11), date(2024, 3, 12)])
        self.assertEqual(reports[0].duration, '09:15:00')
        self.assertFalse(reports[1].driving_time)

    def test_03_missing_columns(self):
        content = "date,conducteur\n2024-03-04,OBC-42\n".encode('utf-8')
        with self.assertRaises(ValidationError):
            self._wizard(content).action_import()

    def test_04_requires_partner(self):
        wizard = self.env['fleet.compliance.report.import.wizard'].create({
            'data_file': base64.b64encode(b"date,duree\n2024-03-04,08:00:00\n"),
            'filename': 'rapports.csv',
        })
        self.assertFalse(wizard.partner_id)
        with self.assertRaises(UserError):
            wizard.action_import()

    def test_05_default_partner_is_active_partner(self):
        self.partner.action_activate()
        wizard = self.env['fleet.compliance.report.import.wizard'].create({
            'data_file': base64.b64encode(b"date,duree\n2024-03-04,08:00:00\n"),
            'filename': 'rapports.csv',
        })
        self.assertEqual(wizard.partner_id, self.partner)
        wizard.action_import()
        self.assertEqual(self.Report.search_count([('partner_id', '=', self.partner.id)]), 1)

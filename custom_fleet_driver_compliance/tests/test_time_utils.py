# -*- coding: utf-8 -*-
"""Tests for the HH:MM:SS duration helpers."""
from odoo.tests import TransactionCase, tagged

from ..tools.time_utils import format_duration, hours_from_duration, parse_duration


@tagged('post_install', '-at_install', 'fleet_compliance')
class TestTimeUtils(TransactionCase):

    def test_01_parse_valid_duration(self):
        self.assertEqual(parse_duration('08:30:00'), 30600)
        self.assertEqual(parse_duration('00:00:59'), 59)
        self.assertEqual(parse_duration('41:15:30'), 148530)

    def test_02_parse_malformed_duration_is_zero(self):
        """Malformed values never raise and read as zero."""
        for value in ('', 'bad', '1:2', '1:2:3:4', '08:xx:00', None, 42, ['08', '00', '00']):
            self.assertEqual(parse_duration(value), 0, value)

    def test_03_format_duration(self):
        self.assertEqual(format_duration(30600), '08:30:00')
        self.assertEqual(format_duration(0), '00:00:00')
        self.assertEqual(format_duration(148530), '41:15:30')

    def test_04_format_floors_partial_units(self):
        self.assertEqual(format_duration(59.9), '00:00:59')
        self.assertEqual(format_duration(3599.99), '00:59:59')

    def test_05_format_not_a_number(self):
        self.assertEqual(format_duration(float('nan')), '00:00:00')
        self.assertEqual(format_duration(None), '00:00:00')
        self.assertEqual(format_duration('abc'), '00:00:00')

    def test_06_round_trip_of_padded_durations(self):
        for value in ('00:00:00', '07:45:30', '12:05:09', '23:59:59'):
            self.assertEqual(format_duration(parse_duration(value)), value)

    def test_07_hours_from_duration(self):
        self.assertAlmostEqual(hours_from_duration('08:30:00'), 8.5)
        self.assertAlmostEqual(hours_from_duration('01:00:36'), 1.01)
        self.assertEqual(hours_from_duration('1:2'), 0.0)

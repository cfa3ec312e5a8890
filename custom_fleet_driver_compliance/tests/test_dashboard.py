# -*- coding: utf-8 -*-
"""Tests for the compliance dashboard and list pages read from the database."""
from datetime import date

from odoo.tests import TransactionCase, tagged


@tagged('post_install', '-at_install', 'fleet_compliance')
class TestComplianceDashboard(TransactionCase):

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.service = cls.env['fleet.compliance.reporting.service']
        cls.today = date(2024, 3, 20)
        Partner = cls.env['fleet.compliance.partner']
        cls.partner = Partner.create({'name': 'Dashboard Partner'})
        cls.partner.action_activate()
        cls.other_partner = Partner.create({'name': 'Dashboard Other Partner'})

        Driver = cls.env['fleet.compliance.driver']
        cls.driver_1 = Driver.create({'name': 'Koné', 'first_name': 'Awa', 'obc_key': 'OBC-001'})
        cls.driver_2 = Driver.create({'name': 'Kouassi', 'first_name': 'Yao', 'obc_key': 'OBC-002'})
        cls.driver_other = Driver.create({
            'name': 'Bamba', 'first_name': 'Ali', 'partner_id': cls.other_partner.id,
        })

        cls.speeding = cls.env.ref('custom_fleet_driver_compliance.invariant_speeding')
        cls.rest_time = cls.env.ref('custom_fleet_driver_compliance.invariant_daily_rest_time')
        SanctionRule = cls.env['fleet.compliance.sanction.rule']
        SanctionRule.create({
            'invariant_id': cls.speeding.id, 'infraction_type': 'Alerte', 'sanction': 'Avertissement', 'points': 2,
        })
        SanctionRule.create({
            'invariant_id': cls.rest_time.id, 'infraction_type': 'Alarme', 'sanction': 'Mise à pied', 'points': 6,
        })

        Infraction = cls.env['fleet.compliance.infraction']
        cls.infractions = Infraction.create([
            {'date': date(2024, 3, 5), 'driver_id': cls.driver_1.id, 'invariant_id': cls.speeding.id, 'infraction_type': 'Alerte'},
            {'date': date(2024, 3, 12), 'driver_id': cls.driver_1.id, 'invariant_id': cls.speeding.id, 'infraction_type': 'Alerte'},
            {'date': date(2024, 1, 8), 'driver_id': cls.driver_2.id, 'invariant_id': cls.rest_time.id, 'infraction_type': 'Alarme'},
            {'date': date(2023, 11, 2), 'driver_id': cls.driver_2.id, 'invariant_id': cls.rest_time.id, 'infraction_type': 'Alarme'},
            {'date': date(2024, 2, 14), 'invariant_id': cls.speeding.id, 'infraction_type': 'Alarme'},
        ])
        # another partner's data never shows up on the dashboard
        Infraction.create({
            'date': date(2024, 3, 6),
            'partner_id': cls.other_partner.id,
            'driver_id': cls.driver_other.id,
            'invariant_id': cls.speeding.id,
            'infraction_type': 'Alerte',
        })

        Report = cls.env['fleet.compliance.report']
        Report.create([
            {'date': date(2024, 3, 4), 'driver_id': cls.driver_1.id, 'duration': '08:30:00', 'driving_time': '06:00:00'},
            {'date': date(2024, 3, 5), 'driver_id': cls.driver_1.id, 'duration': '07:45:30', 'driving_time': '05:30:00'},
            {'date': date(2024, 1, 9), 'driver_id': cls.driver_2.id, 'duration': 'bad', 'driving_time': '02:00:00'},
        ])

        brand = cls.env['fleet.vehicle.model.brand'].create({'name': 'Compliance Brand'})
        model = cls.env['fleet.vehicle.model'].create({'name': 'Compliance Model', 'brand_id': brand.id})
        Vehicle = cls.env['fleet.vehicle']
        cls.vehicle_1 = Vehicle.create({'model_id': model.id, 'license_plate': 'CMP-001'})
        cls.vehicle_2 = Vehicle.create({'model_id': model.id, 'license_plate': 'CMP-002'})
        Equipment = cls.env['fleet.compliance.equipment']
        cls.equipment_old = Equipment.create({'date': date(2023, 5, 2), 'vehicle_id': cls.vehicle_1.id, 'has_beacon': True})
        cls.equipment_new = Equipment.create({
            'date': date(2024, 2, 1), 'vehicle_id': cls.vehicle_2.id, 'has_camera': True, 'has_beacon': True,
        })

    # ========== DASHBOARD ==========

    def test_01_dashboard_series(self):
        data = self.service.get_dashboard_data(year='2024', today=self.today)
        self.assertEqual(data['partner'], {'id': self.partner.id, 'name': 'Dashboard Partner'})
        self.assertEqual(len(data['monthly_infractions']), 12)
        self.assertEqual(data['monthly_infractions'][0], {'name': 'Jan', 'total': 1})
        self.assertEqual(data['monthly_infractions'][1]['total'], 1)
        self.assertEqual(data['monthly_infractions'][2], {'name': 'Mar', 'total': 2})
        self.assertEqual(data['monthly_work_hours'][2]['total'], 16)
        self.assertEqual(data['monthly_work_hours'][0]['total'], 0)
        self.assertEqual(data['monthly_driving_hours'][2]['total'], 12)
        self.assertEqual(data['monthly_driving_hours'][0]['total'], 2)
        self.assertEqual(data['infractions_by_type'], {'Alerte': 2, 'Alarme': 2})

    def test_02_dashboard_rankings(self):
        data = self.service.get_dashboard_data(year='2024', today=self.today)
        self.assertEqual(data['top_invariants'][0], {
            'invariant_id': self.speeding.id, 'name': 'Excès de vitesse', 'total': 3,
        })
        self.assertEqual(data['points_lost_per_driver'], [
            {'driver_id': self.driver_2.id, 'name': 'Yao Kouassi', 'total': 6},
            {'driver_id': self.driver_1.id, 'name': 'Awa Koné', 'total': 4},
        ])
        recent = data['recent_infractions']
        self.assertEqual(len(recent), 5)
        self.assertEqual(recent[0]['date'], date(2024, 3, 12))
        self.assertEqual(recent[0]['driver_name'], 'Awa Koné')
        self.assertEqual(recent[-1]['date'], date(2023, 11, 2))

    def test_03_dashboard_counters(self):
        data = self.service.get_dashboard_data(year='all', today=self.today)
        counters = data['counters']
        self.assertEqual(counters['infractions_this_month'], 2)
        self.assertEqual(counters['drivers'], self.env['fleet.compliance.driver'].search_count([]))
        self.assertEqual(counters['vehicles'], self.env['fleet.vehicle'].search_count([]))
        self.assertEqual(counters['partners'], self.env['fleet.compliance.partner'].search_count([]))
        self.assertEqual(counters['active_partners'], 1)
        self.assertEqual(sum(entry['total'] for entry in data['monthly_infractions']), 5)

    def test_04_dashboard_without_active_partner(self):
        """Without active partner nothing is partner-filtered and no SCP rule applies."""
        self.partner.action_deactivate()
        data = self.service.get_dashboard_data(year='2024', today=self.today)
        self.assertFalse(data['partner'])
        self.assertEqual(data['points_lost_per_driver'], [])
        self.assertEqual(data['infractions_by_type']['Alerte'], 3)

    def test_05_dashboard_driver_points_match_model(self):
        """The computed points on the driver agree with the dashboard ranking."""
        self.assertEqual(self.driver_1.points_lost_total, 4)
        self.assertEqual(self.driver_2.points_lost_total, 12, "The 2023 infraction counts on the driver form")

    # ========== LIST PAGES ==========

    def test_06_sanction_rule_list(self):
        page = self.service.list_sanction_rules(page_size=10)
        self.assertEqual(page['total'], 2)
        self.assertEqual([row['invariant_title'] for row in page['items']], ['Excès de vitesse', 'Temps de repos journalier'])

        page = self.service.list_sanction_rules(search='pied')
        self.assertEqual(page['total'], 1)
        self.assertEqual(page['items'][0]['sanction'], 'Mise à pied')

        page = self.service.list_sanction_rules(partner_id=self.other_partner.id)
        self.assertEqual(page['total'], 0)

    def test_07_driver_list(self):
        page = self.service.list_drivers()
        self.assertEqual(page['total'], 2)
        self.assertEqual({row['partner_name'] for row in page['items']}, {'Dashboard Partner'})

        # the active partner wins over the dropdown
        page = self.service.list_drivers(partner_filter=str(self.other_partner.id))
        self.assertEqual(page['total'], 2)

        page = self.service.list_drivers(active_partner_id=False, partner_filter=str(self.other_partner.id))
        self.assertEqual([row['full_name'] for row in page['items']], ['Ali Bamba'])

        # a non-numeric dropdown value lists every partner's drivers
        page = self.service.list_drivers(active_partner_id=False, partner_filter='inconnu')
        self.assertEqual(page['total'], self.env['fleet.compliance.driver'].search_count([]))

        page = self.service.list_drivers(search='kou', page_size=1)
        self.assertEqual(page['total'], 1)
        self.assertEqual(page['total_pages'], 1)
        self.assertEqual(page['items'][0]['id'], self.driver_2.id)

    def test_08_equipment_list(self):
        page = self.service.list_equipment()
        self.assertEqual([row['id'] for row in page['items']], [self.equipment_new.id, self.equipment_old.id])
        self.assertEqual(page['items'][0]['vehicle_registration'], 'CMP-002')

        page = self.service.list_equipment(year='2023')
        self.assertEqual([row['id'] for row in page['items']], [self.equipment_old.id])

        page = self.service.list_equipment(search='cmp-001')
        self.assertEqual(page['total'], 1)

        page = self.service.list_equipment(page=2, page_size=1)
        self.assertEqual([row['id'] for row in page['items']], [self.equipment_old.id])
        self.assertEqual(page['total_pages'], 2)

# -*- coding: utf-8 -*-
"""Driver Compliance Record Service.

Writes (create, update, delete) that report their outcome instead of
raising: each call returns a WriteResult the caller may check or ignore.
A failing write is rolled back on its own savepoint, logged, and turned
into a generic error notification for the user.
"""
import logging
from collections import namedtuple

from psycopg2 import IntegrityError

from odoo import _, api, models
from odoo.exceptions import MissingError, UserError

_logger = logging.getLogger(__name__)

WriteResult = namedtuple('WriteResult', ['success', 'record_id', 'message'])

INFRACTION_FORM_FIELDS = (
    'date', 'report_id', 'driver_id', 'invariant_id', 'infraction_type', 'count',
    'disciplinary_measure', 'other_measures', 'follow_up_required', 'improvement_noted', 'follow_up_date',
)
WORK_TIME_ANALYSIS_FIELDS = ('cause_analysis', 'action_taken', 'follow_up')

# Value of an empty select in the entry forms
EMPTY_SELECT = 'none'


class FleetComplianceRecordService(models.AbstractModel):
    """Service writing compliance records with an explicit result.

    Usage:
        service = self.env["fleet.compliance.record.service"]
        result = service.save_infraction({"infraction_type": "Alerte", ...})
        return service.notification_action(result, _("Infraction enregistrée"))
    """

    _name = 'fleet.compliance.record.service'
    _description = 'Service d\'écriture conformité'

    # -------------------------------------------------------------------------
    # GENERIC WRITES
    # -------------------------------------------------------------------------
    @api.model
    def _run_write(self, model_name, operation, record_id=False):
        """Run a write on its own savepoint and report the outcome.

        Args:
            model_name: Model written, for the log
            operation: Callable performing the write, returns the record id
            record_id: Id reported when the write fails

        Returns:
            WriteResult
        """
        try:
            with self.env.cr.savepoint():
                record_id = operation()
                self.env.flush_all()
        except (UserError, IntegrityError) as exc:
            _logger.warning("Échec d'écriture sur %s (id=%s): %s", model_name, record_id, exc)
            return WriteResult(False, record_id, str(exc))
        return WriteResult(True, record_id, False)

    @api.model
    def _browse_existing(self, model_name, record_id):
        record = self.env[model_name].browse(record_id).exists()
        if not record:
            raise MissingError(_("L'enregistrement %(model)s #%(id)s n'existe plus.", model=model_name, id=record_id))
        return record

    @api.model
    def create_record(self, model_name, vals):
        return self._run_write(model_name, lambda: self.env[model_name].create(vals).id)

    @api.model
    def update_record(self, model_name, record_id, vals):
        def operation():
            self._browse_existing(model_name, record_id).write(vals)
            return record_id
        return self._run_write(model_name, operation, record_id)

    @api.model
    def delete_record(self, model_name, record_id):
        def operation():
            self._browse_existing(model_name, record_id).unlink()
            return record_id
        return self._run_write(model_name, operation, record_id)

    # -------------------------------------------------------------------------
    # NOTIFICATIONS
    # -------------------------------------------------------------------------
    @api.model
    def notification_action(self, result, success_message):
        """Client action showing the outcome of a write.

        Args:
            result: WriteResult
            success_message: Text shown when the write succeeded

        Returns:
            dict: display_notification client action
        """
        if result.success:
            title, message, notification_type = _('Succès'), success_message, 'success'
        else:
            title, message, notification_type = _('Erreur'), _("Une erreur s'est produite."), 'danger'
        return {
            'type': 'ir.actions.client',
            'tag': 'display_notification',
            'params': {
                'title': title,
                'message': message,
                'type': notification_type,
                'sticky': False,
            },
        }

    # -------------------------------------------------------------------------
    # ENTRY FORMS
    # -------------------------------------------------------------------------
    @api.model
    def save_work_time_analysis(self, report_id, vals):
        """Create or update the cause / action / follow-up analysis of a report.

        Returns:
            WriteResult: failed when no partner is active
        """
        if not self.env['fleet.compliance.partner'].get_active_partner():
            return WriteResult(False, False, _("Aucun partenaire actif."))
        values = {key: vals[key] for key in WORK_TIME_ANALYSIS_FIELDS if key in vals}
        model_name = 'fleet.compliance.work.time.analysis'
        existing = self.env[model_name].search([('report_id', '=', report_id)], limit=1)
        if existing:
            return self.update_record(model_name, existing.id, values)
        return self.create_record(model_name, dict(values, report_id=report_id))

    @api.model
    def save_infraction(self, vals, infraction_id=None):
        """Create or update an infraction for the active partner.

        Empty selects ("none") are stored as empty values.

        Returns:
            WriteResult: failed when no partner is active
        """
        partner = self.env['fleet.compliance.partner'].get_active_partner()
        if not partner:
            return WriteResult(False, infraction_id or False, _("Aucun partenaire actif sélectionné."))
        values = {
            key: (False if vals[key] == EMPTY_SELECT else vals[key])
            for key in INFRACTION_FORM_FIELDS
            if key in vals
        }
        values['partner_id'] = partner.id
        if infraction_id:
            return self.update_record('fleet.compliance.infraction', infraction_id, values)
        return self.create_record('fleet.compliance.infraction', values)

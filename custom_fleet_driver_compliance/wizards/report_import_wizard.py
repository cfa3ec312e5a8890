# -*- coding: utf-8 -*-
import base64
import csv
import logging
from datetime import date
from io import BytesIO, StringIO

import openpyxl

from odoo import _, fields, models
from odoo.exceptions import UserError, ValidationError

from ..tools.date_utils import normalize_date, weekday_label

_logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"date", "duree"}
OPTIONAL_COLUMNS = {
    "jour": "weekday",
    "heure_debut_trajet": "trip_start",
    "heure_fin_trajet": "trip_end",
    "temps_conduite": "driving_time",
}


class FleetComplianceReportImportWizard(models.TransientModel):
    _name = "fleet.compliance.report.import.wizard"
    _description = "Assistant d'import des rapports de travail"

    data_file = fields.Binary(string="Fichier (XLSX ou CSV)", required=True)
    filename = fields.Char(string="Nom du fichier")
    partner_id = fields.Many2one(
        "fleet.compliance.partner",
        string="Partenaire",
        default=lambda self: self.env["fleet.compliance.partner"].get_active_partner(),
    )

    def action_import(self):
        self.ensure_one()
        if not self.data_file:
            raise UserError(_("Veuillez sélectionner un fichier à importer."))
        if not self.partner_id:
            raise UserError(_("Aucun partenaire actif: activez un partenaire avant d'importer des rapports."))
        _logger.info("Import des rapports depuis %s pour %s", self.filename or "inconnu", self.partner_id.name)

        lines = self._parse_file()
        report_model = self.env["fleet.compliance.report"]
        driver_cache = {}
        created_count = 0
        skipped_count = 0
        error_count = 0
        for idx, row in enumerate(lines, start=2):
            vals = self._prepare_report_vals(row, driver_cache)
            if not vals:
                _logger.debug("Ligne %d ignorée: date illisible %r", idx, row.get("date"))
                skipped_count += 1
                continue
            try:
                with self.env.cr.savepoint():
                    report_model.create(vals)
                created_count += 1
            except (UserError, ValueError) as exc:
                error_count += 1
                _logger.warning("Erreur d'import ligne %d: %s", idx, exc)
        _logger.info(
            "Import terminé: %d créé(s), %d ignoré(s), %d erreur(s)", created_count, skipped_count, error_count
        )

        message = _(
            "Import terminé : %(created)d rapport(s) créé(s), %(skipped)d ignoré(s) (date invalide), %(errors)d erreur(s)"
        ) % {"created": created_count, "skipped": skipped_count, "errors": error_count}
        return {
            "type": "ir.actions.client",
            "tag": "display_notification",
            "params": {
                "title": _("Import des rapports"),
                "message": message,
                "type": "warning" if skipped_count or error_count else "success",
                "sticky": False,
                "next": {"type": "ir.actions.act_window_close"},
            },
        }

    def _parse_file(self):
        raw = base64.b64decode(self.data_file)
        extension = (self.filename or "csv").split(".")[-1].lower()
        if extension in {"xlsx", "xlsm"}:
            workbook = openpyxl.load_workbook(BytesIO(raw), read_only=True, data_only=True)
            rows = list(workbook.active.iter_rows(values_only=True))
            if not rows:
                raise ValidationError(_("Le fichier Excel est vide."))
            headers = [str(cell or "").strip().lower() for cell in rows[0]]
            self._check_columns(headers)
            data = []
            for row in rows[1:]:
                row_dict = {}
                for idx, header in enumerate(headers):
                    value = row[idx] if idx < len(row) else None
                    if value is None:
                        row_dict[header] = ""
                    elif isinstance(value, (str, date)):
                        # date cells are kept as date objects
                        row_dict[header] = value
                    else:
                        row_dict[header] = str(value)
                data.append(row_dict)
            return data

        text = raw.decode("utf-8-sig")
        reader = csv.DictReader(StringIO(text))
        headers = [(name or "").strip().lower() for name in reader.fieldnames or []]
        self._check_columns(headers)
        reader.fieldnames = headers
        return list(reader)

    def _check_columns(self, headers):
        missing = REQUIRED_COLUMNS - set(headers)
        if missing:
            raise ValidationError(_("Colonnes obligatoires manquantes : %s") % ", ".join(sorted(missing)))

    def _find_driver(self, reference, driver_cache):
        """Match a driver on its OBC key first, then on its full name."""
        reference = (reference or "").strip()
        if not reference:
            return False
        if reference not in driver_cache:
            Driver = self.env["fleet.compliance.driver"]
            driver = Driver.search([("obc_key", "=", reference)], limit=1) or Driver.search(
                [("full_name", "=ilike", reference)], limit=1
            )
            if not driver:
                _logger.debug("Conducteur %r introuvable, rapport importé sans conducteur", reference)
            driver_cache[reference] = driver.id
        return driver_cache[reference]

    def _prepare_report_vals(self, row, driver_cache):
        report_date = normalize_date(row.get("date"))
        if report_date is None:
            return False
        vals = {
            "date": report_date,
            "partner_id": self.partner_id.id,
            "duration": str(row.get("duree") or "").strip() or False,
            "driver_id": self._find_driver(row.get("conducteur"), driver_cache),
        }
        for column, field_name in OPTIONAL_COLUMNS.items():
            value = row.get(column)
            if isinstance(value, str):
                value = value.strip()
            if value:
                vals[field_name] = str(value)
        if "weekday" not in vals:
            vals["weekday"] = weekday_label(report_date)
        return vals

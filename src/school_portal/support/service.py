from __future__ import annotations

import logging
from typing import List

from ..common.validators import is_valid_email
from ..core.constants import SUPPORT_APPEND_RANGE, SUPPORT_RECIPIENT_CELLS
from ..core.exceptions import ValidationError
from ..notifications.mailer import Mailer
from ..sheets.gateway import SpreadsheetGateway
from .model import SupportRequest

logger = logging.getLogger(__name__)

SUBJECT = "Form Submission Data"


class SupportService:
    """Use case: record a support request and forward it to the support team.

    The team's addresses live in cells A1:A3 of the same sheet, so staff can
    change recipients without a deploy.
    """

    def __init__(self, sheets: SpreadsheetGateway, spreadsheet_id: str, mailer: Mailer):
        self._sheets = sheets
        self._spreadsheet_id = spreadsheet_id
        self._mailer = mailer

    def recipients(self) -> List[str]:
        grids = self._sheets.batch_fetch(self._spreadsheet_id, SUPPORT_RECIPIENT_CELLS)
        addresses = [g[0][0] for g in grids if g and g[0] and g[0][0]]
        logger.debug("Retrieved support addresses: %s", addresses)
        return [a for a in addresses if is_valid_email(a)]

    def submit(self, form: SupportRequest) -> List[str]:
        self._sheets.append_row(self._spreadsheet_id, SUPPORT_APPEND_RANGE, form.as_row())

        recipients = self.recipients()
        if not recipients:
            raise ValidationError("No valid email addresses found in specified cells")

        body = form.as_text()
        for address in recipients:
            logger.info("Sending support form to %s", address)
            self._mailer.send(address, SUBJECT, body)
        return recipients

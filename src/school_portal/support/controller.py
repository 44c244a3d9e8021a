from __future__ import annotations

import logging

from flask import Flask, request

from ..container import Container
from .model import SupportRequest

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/submit", methods=["POST"], endpoint="submit_support")
    def submit_support():
        data = request.get_json(silent=True) or request.form.to_dict()
        try:
            container.support_service.submit(SupportRequest.from_form(data))
        except Exception:
            logger.exception("Error saving form data or sending emails")
            return "Error saving form data or sending emails", 500
        return "Form data saved and emails sent successfully!", 200

from __future__ import annotations

import logging

from flask import Flask, jsonify, request, send_from_directory

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _file_json(f) -> dict:
        return {"fileName": f.name, "url": f.url, "fileId": f.file_id}

    @app.route("/upload", methods=["POST"], endpoint="upload")
    def upload():
        file = request.files.get("file")
        try:
            stored = container.media_service.upload_image(
                file.filename if file else None,
                file.stream if file else None,
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Upload error")
            return jsonify({"error": "Internal Server Error"}), 500

        logger.info("Uploaded image URL: %s", stored.url)
        return jsonify({"secure_url": stored.url}), 200

    @app.route("/images", methods=["GET"], endpoint="images")
    def images():
        try:
            return jsonify(container.media_service.list_gallery()), 200
        except Exception:
            logger.exception("Error fetching images")
            return jsonify({"error": "Internal Server Error"}), 500

    @app.route("/api/timetables/view/<class_name>", methods=["GET"], endpoint="class_timetables")
    def class_timetables(class_name: str):
        try:
            files = container.media_service.list_timetables(class_name)
        except Exception:
            logger.exception("Error fetching timetable list for %s", class_name)
            return jsonify({"error": "Failed to fetch file list"}), 500
        return jsonify([_file_json(f) for f in files])

    @app.route("/api/exam-timetables/view/<class_name>", methods=["GET"], endpoint="exam_timetables")
    def exam_timetables(class_name: str):
        try:
            files = container.media_service.list_timetables(class_name, exam=True)
        except Exception:
            logger.exception("Error fetching exam timetable list for %s", class_name)
            return jsonify({"error": "Failed to fetch file list"}), 500
        return jsonify([_file_json(f) for f in files])

    prefix = container.media_config.url_prefix.rstrip("/")
    if prefix.startswith("/"):
        @app.route(f"{prefix}/<path:file_id>", methods=["GET"], endpoint="media_file")
        def media_file(file_id: str):
            return send_from_directory(container.media_config.root_dir, file_id)

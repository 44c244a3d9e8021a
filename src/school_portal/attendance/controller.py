from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _roll_number():
        data = request.get_json(silent=True) or {}
        return data.get("rollNumber")

    def _entry_json(e) -> dict:
        return {"date": e.date, "status": e.status}

    @app.route("/attendance/rollNumber", methods=["POST"], endpoint="attendance_by_roll_number")
    def attendance_by_roll_number():
        try:
            record = container.attendance_service.get_full_attendance(_roll_number())
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Error fetching attendance report")
            return jsonify({"error": "Failed to fetch attendance report"}), 500

        return jsonify(
            {
                "success": True,
                "attendanceData": {
                    "classSheet": record.sheet_name,
                    "rollNumber": record.roll_number,
                    "studentName": record.student_name,
                    "section": record.section,
                    "attendance": [_entry_json(e) for e in record.entries],
                },
            }
        )

    @app.route("/attendance/latest", methods=["POST"], endpoint="attendance_latest")
    def attendance_latest():
        try:
            latest = container.attendance_service.get_latest_attendance(_roll_number())
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Error fetching latest attendance report")
            return jsonify({"error": "Failed to fetch latest attendance report"}), 500

        return jsonify(
            {
                "success": True,
                "latestAttendanceData": {
                    "classSheet": latest.sheet_name,
                    "rollNumber": latest.roll_number,
                    "studentName": latest.student_name,
                    "section": latest.section,
                    "latestDate": latest.latest_date,
                    "latestAttendanceStatus": latest.latest_status,
                },
            }
        )

    @app.route("/attendance/tracker", methods=["POST"], endpoint="attendance_tracker")
    def attendance_tracker():
        try:
            summary = container.attendance_service.get_attendance_tracker(_roll_number())
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Error fetching attendance tracker")
            return jsonify({"error": "Failed to fetch attendance report"}), 500

        return jsonify(
            {
                "success": True,
                "totalDays": summary.total_days,
                "daysPresent": summary.days_present,
                "attendancePercentage": summary.attendance_percentage,
            }
        )

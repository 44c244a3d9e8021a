from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            student = container.student_service.authenticate(data.get("rollNumber"), data.get("password"))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except Exception:
            logger.exception("Error logging in")
            return jsonify({"error": "Internal Server Error"}), 500
        return jsonify(student), 200

    @app.route("/student/<roll_number>", methods=["GET"], endpoint="student_profile")
    def student_profile(roll_number: str):
        try:
            student = container.student_service.get_profile(roll_number)
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Error fetching student details for %s", roll_number)
            return jsonify({"error": "Internal Server Error"}), 500
        return jsonify(student), 200

    @app.route("/report/<roll_number>", methods=["GET"], endpoint="exam_report")
    def exam_report(roll_number: str):
        try:
            marks = container.student_service.get_exam_report(roll_number)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("Error fetching exam report for roll number %s", roll_number)
            return "Failed to retrieve the exam report", 500

        return jsonify(
            [
                {
                    "rollNumber": m.roll_number,
                    "firstName": m.first_name,
                    "lastName": m.last_name,
                    "subject": m.subject,
                    "marks": m.marks,
                    "grade": m.grade,
                    "typeofexam": m.type_of_exam,
                }
                for m in marks
            ]
        ), 200

    @app.route("/feeStatus/<roll_number>", methods=["GET"], endpoint="fee_status")
    def fee_status(roll_number: str):
        try:
            status = container.student_service.get_fee_status(roll_number)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except Exception:
            logger.exception("Error fetching fee status for roll number %s", roll_number)
            return "Failed to retrieve the fee status", 500
        return jsonify({"feeStatus": status}), 200

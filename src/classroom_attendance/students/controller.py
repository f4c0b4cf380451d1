from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.standing import classify_standing
from ..common.validators import require_json_object, validate_new_student
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    students = container.student_service

    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        term = request.args.get("q", "")
        rows = students.search(term) if term else students.get_all()
        return jsonify({"success": True, "data": [s.to_dict() for s in rows]})

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: int):
        try:
            return jsonify({"success": True, "data": students.get_by_id(student_id).to_dict()})
        except NotFoundError as e:
            return _not_found(e)

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    def create_student():
        try:
            data = require_json_object(request.get_json(silent=True))
            validate_new_student(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        student = students.create(data)
        return jsonify({"success": True, "data": student.to_dict()}), 201

    @app.route("/api/students/<int:student_id>", methods=["PUT", "PATCH"], endpoint="update_student")
    def update_student(student_id: int):
        try:
            data = require_json_object(request.get_json(silent=True))
            return jsonify({"success": True, "data": students.update(student_id, data).to_dict()})
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return _not_found(e)

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: int):
        try:
            students.delete(student_id)
            return jsonify({"success": True})
        except NotFoundError as e:
            return _not_found(e)

    @app.route("/api/roster", methods=["GET"], endpoint="roster")
    def roster():
        """Students joined with their attendance tally and standing badge."""

        stats = container.attendance_service.get_attendance_stats()
        rows = []
        for s in students.search(request.args.get("q", "")):
            counts = stats.get(s.id)
            rows.append(
                {
                    "student": s.to_dict(),
                    "stats": counts.to_dict() if counts else None,
                    "rate": counts.rate if counts else 0,
                    "standing": classify_standing(counts).value,
                }
            )
        return jsonify({"success": True, "data": rows})

from __future__ import annotations

import calendar
from datetime import date
from typing import Any, Mapping

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, to_iso_date
from ..common.validators import require_json_object, require_status
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def _attendance_payload(data: Mapping[str, Any]) -> dict:
    """Coerce JSON types; the store accepts whatever fields remain."""

    out = dict(data)
    for key in ("studentId", "student_id"):
        if key in out:
            try:
                out[key] = int(out[key])
            except (TypeError, ValueError):
                raise ValidationError("studentId must be an integer")
    if "status" in out:
        out["status"] = require_status(out["status"])
    return out


def _parse_date_arg(value: str, field_name: str) -> date:
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def _month_bounds(today: date) -> tuple[date, date]:
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    def _fail(e: Exception, status: int):
        return jsonify({"success": False, "message": str(e)}), status

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        return jsonify({"success": True, "data": [r.to_dict() for r in attendance.get_all()]})

    @app.route("/api/attendance/<int:record_id>", methods=["GET"], endpoint="get_attendance")
    def get_attendance(record_id: int):
        try:
            return jsonify({"success": True, "data": attendance.get_by_id(record_id).to_dict()})
        except NotFoundError as e:
            return _fail(e, 404)

    @app.route("/api/attendance", methods=["POST"], endpoint="create_attendance")
    def create_attendance():
        try:
            payload = _attendance_payload(require_json_object(request.get_json(silent=True)))
        except ValidationError as e:
            return _fail(e, 400)
        return jsonify({"success": True, "data": attendance.create(payload).to_dict()}), 201

    @app.route("/api/attendance/<int:record_id>", methods=["PUT", "PATCH"], endpoint="update_attendance")
    def update_attendance(record_id: int):
        try:
            payload = _attendance_payload(require_json_object(request.get_json(silent=True)))
            return jsonify({"success": True, "data": attendance.update(record_id, payload).to_dict()})
        except ValidationError as e:
            return _fail(e, 400)
        except NotFoundError as e:
            return _fail(e, 404)

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(record_id: int):
        try:
            attendance.delete(record_id)
            return jsonify({"success": True})
        except NotFoundError as e:
            return _fail(e, 404)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="today_attendance")
    def today_attendance():
        return jsonify({"success": True, "data": [r.to_dict() for r in attendance.get_today_attendance()]})

    @app.route("/api/attendance/today/summary", methods=["GET"], endpoint="today_summary")
    def today_summary():
        total = len(container.student_service.get_all())
        return jsonify({"success": True, "data": attendance.get_today_summary(total_students=total).to_dict()})

    @app.route("/api/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            payload = _attendance_payload(require_json_object(request.get_json(silent=True)))
            student_id = payload.get("studentId", payload.get("student_id"))
            if student_id is None or "status" not in payload:
                raise ValidationError("studentId and status are required")
        except ValidationError as e:
            return _fail(e, 400)

        record = attendance.mark_attendance(student_id, payload["status"])
        return jsonify({"success": True, "data": record.to_dict()})

    @app.route("/api/attendance/existing", methods=["GET"], endpoint="existing_attendance")
    def existing_attendance():
        try:
            student_id = int(request.args.get("studentId", ""))
        except ValueError:
            return _fail(ValidationError("studentId must be an integer"), 400)
        try:
            on_date = _parse_date_arg(request.args.get("date", ""), "date")
        except ValidationError as e:
            return _fail(e, 400)

        record = attendance.find_for_student_and_date(student_id, on_date)
        return jsonify({"success": True, "data": record.to_dict() if record else None})

    @app.route("/api/attendance/student/<int:student_id>", methods=["GET"], endpoint="student_attendance")
    def student_attendance(student_id: int):
        rows = attendance.get_student_attendance(student_id)
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

    @app.route("/api/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    def attendance_stats():
        stats = attendance.get_attendance_stats()
        return jsonify({"success": True, "data": {str(k): v.to_dict() for k, v in stats.items()}})

    @app.route("/api/attendance/monthly", methods=["GET"], endpoint="monthly_attendance")
    def monthly_attendance():
        default_start, default_end = _month_bounds(attendance.today())
        try:
            start = _parse_date_arg(request.args.get("start") or to_iso_date(default_start), "start")
            end = _parse_date_arg(request.args.get("end") or to_iso_date(default_end), "end")
        except ValidationError as e:
            return _fail(e, 400)

        days = attendance.get_monthly_attendance(start, end)
        data = {k: {**v.to_dict(), "rate": v.rate} for k, v in days.items()}
        return jsonify({"success": True, "data": data})

    @app.route("/api/analytics", methods=["GET"], endpoint="analytics")
    def analytics():
        time_range = request.args.get("range", "month")
        return jsonify({"success": True, "data": attendance.get_analytics(time_range)})

    @app.route("/api/reports", methods=["GET"], endpoint="reports")
    def reports():
        rows = attendance.search_reports(request.args.get("q", ""))
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

from __future__ import annotations

import calendar
import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..common.validators import require_date_range, require_int_between, require_non_empty, require_period
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _parse_month(value) -> int:
    text = str(value or "").strip()
    for number in range(1, 13):
        if text.lower() == calendar.month_name[number].lower():
            return number
    return require_int_between(text, "month", 1, 12)


def register(app: Flask, container: Container) -> None:
    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except Exception as e:
                logger.exception("Unhandled error in %s", view.__name__)
                return jsonify({"success": False, "message": "Error calculating attendance", "error": str(e)}), 500

        return wrapper

    def _respond(result):
        body = result.to_dict()
        if not result.computation.ok:
            body["message"] = "No shift schedule assigned to employee"
            return jsonify(body), 404
        return jsonify(body)

    @app.route("/api/compute-attendance/calculate", methods=["POST"], endpoint="compute_attendance_calculate")
    @json_errors
    def calculate():
        data = request.get_json(silent=True) or {}
        user_id = require_non_empty(data.get("userId"), "userId")
        start, end = require_date_range(data.get("startDate"), data.get("endDate"))

        result = container.compute_service.calculate(dtr_user_id=user_id, start=start, end=end)
        return _respond(result)

    @app.route("/api/compute-attendance/calculate-period", methods=["POST"], endpoint="compute_attendance_calculate_period")
    @json_errors
    def calculate_period():
        data = request.get_json(silent=True) or {}
        user_id = require_non_empty(data.get("userId"), "userId")
        year = require_int_between(data.get("year"), "year", 1900, 9999)
        month = _parse_month(data.get("month"))
        period = require_period(data.get("period"))

        result = container.compute_service.calculate_period(dtr_user_id=user_id, year=year, month=month, period=period)
        return _respond(result)

    @app.route("/api/computed-dtr", methods=["POST"], endpoint="computed_dtr_create")
    @json_errors
    def create_computed_dtr():
        data = request.get_json(silent=True) or {}
        user_id = require_non_empty(data.get("userId"), "userId")
        year = require_int_between(data.get("year"), "year", 1900, 9999)
        month = _parse_month(data.get("month"))
        period = require_period(data.get("period"))

        compute_id, result = container.computed_dtr_service.compute_and_save(
            dtr_user_id=user_id,
            year=year,
            month=month,
            period=period,
            remarks=data.get("remarks"),
            created_by=data.get("createdBy"),
            batch_id=data.get("batchId"),
        )
        body = result.to_dict()
        body.update({"message": "Computed DTR created successfully", "computeid": compute_id})
        return jsonify(body), 201

    @app.route("/api/compute-attendance/check-computed-dtr", methods=["GET"], endpoint="compute_attendance_check_computed")
    @json_errors
    def check_computed_dtr():
        month = _parse_month(request.args.get("computedmonth"))
        year = require_int_between(request.args.get("computedyear"), "computedyear", 1900, 9999)
        period = require_period(request.args.get("period"))

        ids = list(container.computed_dtr_service.computed_employee_ids(month=month, year=year, period=period))
        return jsonify({"success": True, "empObjIds": ids, "count": len(ids)})

    @app.route("/api/compute-attendance/check-all-periods", methods=["GET"], endpoint="compute_attendance_check_all_periods")
    @json_errors
    def check_all_periods():
        month = _parse_month(request.args.get("computedmonth"))
        year = require_int_between(request.args.get("computedyear"), "computedyear", 1900, 9999)
        employee_ids = (request.args.get("emp_objids") or "").split(",")

        periods = container.computed_dtr_service.computed_periods(month=month, year=year, employee_ids=employee_ids)
        return jsonify({"success": True, "periods": periods})

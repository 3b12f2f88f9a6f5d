from __future__ import annotations

from typing import Any, Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date, parse_timestamp
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from ..periods.model import PeriodRequest, PeriodWindow
from ..schedules.repository import InMemoryScheduleSource
from ..schedules.service import ScheduleService
from .rows import day_to_row


def _optional_int(body: dict, *keys: str) -> Optional[int]:
    for key in keys:
        value = body.get(key)
        if value not in (None, ""):
            try:
                return int(value)
            except (TypeError, ValueError):
                raise ValidationError(f"{key} không hợp lệ") from None
    return None


def _optional_date(body: dict, *keys: str):
    for key in keys:
        value = body.get(key)
        if value not in (None, ""):
            try:
                return parse_iso_date(str(value))
            except ValueError:
                raise ValidationError(f"{key} phải có dạng YYYY-MM-DD") from None
    return None


def _optional_bool(body: dict, key: str) -> bool:
    value = body.get(key, False)
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in ("true", "1"):
        return True
    if text in ("false", "0", ""):
        return False
    raise ValidationError(f"{key} phải là true/false")


def _period_request(body: dict) -> PeriodRequest:
    return PeriodRequest(
        year=_optional_int(body, "year"),
        month=_optional_int(body, "month"),
        closing_day=_optional_int(body, "closingDay", "closing_day"),
        start_date=_optional_date(body, "startDate", "start_date"),
        end_date=_optional_date(body, "endDate", "end_date"),
        strict=_optional_bool(body, "strict"),
    )


def _window_json(window: PeriodWindow) -> dict:
    return {
        "start": window.start.isoformat(timespec="milliseconds"),
        "end": window.end.isoformat(timespec="milliseconds"),
    }


def register(app: Flask, container: Container) -> None:
    def json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Body phải là JSON object")
        return data

    def report_service_for(body: dict):
        schedules: Any = body.get("schedules")
        if not schedules:
            return container.report_service
        if not isinstance(schedules, dict):
            raise ValidationError("schedules phải là object theo employeeId")
        source = InMemoryScheduleSource.from_settings(schedules, fallback=container.default_schedule)
        return container.report_service.with_schedules(ScheduleService(container.default_schedule, source))

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"success": False, "error": type(e).__name__, "message": str(e)}), 400

    @app.route("/api/periods/resolve", methods=["POST"], endpoint="api_resolve_period")
    def api_resolve_period():
        body = json_body()
        window = container.period_resolver.resolve(_period_request(body), today=now_local().date())
        return jsonify({"success": True, "period": _window_json(window)})

    @app.route("/api/reports/period", methods=["POST"], endpoint="api_period_report")
    def api_period_report():
        body = json_body()
        window = container.period_resolver.resolve(_period_request(body.get("period") or {}), today=now_local().date())
        records = body.get("records") or []
        if not isinstance(records, list):
            raise ValidationError("records phải là danh sách")

        report = report_service_for(body).build_period_report(
            records=records,
            window=window,
            employee_id=body.get("employeeId"),
            expected_working_days=_optional_int(body, "expectedWorkingDays", "expected_working_days"),
        )
        return jsonify(
            {
                "success": True,
                "period": _window_json(report.window),
                "summaries": report.rows,
                "warnings": [{"kind": w.kind.value, "message": w.message} for w in report.warnings],
            }
        )

    @app.route("/api/reports/day", methods=["POST"], endpoint="api_day_report")
    def api_day_report():
        body = json_body()
        employee_id = body.get("employeeId")
        if not employee_id:
            raise ValidationError("employeeId không hợp lệ")
        work_date = _optional_date(body, "date")
        if work_date is None:
            raise ValidationError("date không hợp lệ")

        service = report_service_for(body)
        records = body.get("records") or []
        day = service.summarize_day(employee_id=str(employee_id), work_date=work_date, records=records)

        payload: dict[str, Any] = {"success": True, "day": day_to_row(day) if day else None, "live": None}
        if day and day.clock_out is None and day.clock_in is not None:
            try:
                now = parse_timestamp(body["now"], container.classifier.tz) if body.get("now") else now_local()
            except (TypeError, ValueError) as exc:
                raise ValidationError(f"now không hợp lệ: {exc}") from exc
            events = [
                e
                for e in container.classifier.classify_all(records).events
                if e.employee_id == str(employee_id) and e.work_date == work_date
            ]
            live = container.live_service.current(events, now=now)
            if live:
                payload["live"] = {
                    "work_minutes": live.work_minutes,
                    "hours": live.hours,
                    "minutes": live.minutes,
                    "is_finished": live.is_finished,
                    "is_on_break": live.is_on_break,
                }
        return jsonify(payload)

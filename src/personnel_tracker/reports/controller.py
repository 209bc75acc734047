from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.model import record_to_dict
from ..common.datetime_utils import format_date, parse_iso_date
from ..container import Container
from .formatter import format_duration
from .query import ReportCriteria


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _criteria_from_args() -> ReportCriteria:
        start = (request.args.get("start") or "").strip()
        end = (request.args.get("end") or "").strip()
        if not start and not end:
            # Same default as the reports page: the current month.
            start_date, end_date = reports.default_range()
        else:
            start_date = parse_iso_date(start) if start else None
            end_date = parse_iso_date(end) if end else None

        department = (request.args.get("department") or "").strip()
        person = (request.args.get("personnel") or "").strip()
        return ReportCriteria(
            start_date=start_date,
            end_date=end_date,
            department=department if department and department != "all" else None,
            personnel_name=person if person and person != "all" else None,
        )

    def _csv_response(text: str, *, filename: str):
        csv_bytes = text.encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports", methods=["GET"], endpoint="reports_summary")
    def reports_summary():
        criteria = _criteria_from_args()
        report = reports.build_report(criteria)
        stats = report.stats
        return jsonify(
            {
                "criteria": {
                    "start": format_date(criteria.start_date) if criteria.start_date else None,
                    "end": format_date(criteria.end_date) if criteria.end_date else None,
                    "department": criteria.department,
                    "personnel": criteria.personnel_name,
                },
                "stats": {
                    "totalMinutes": stats.total_minutes,
                    "totalHours": format_duration(stats.total_minutes),
                    "totalDays": stats.total_days,
                    "totalPersonnel": stats.total_personnel,
                    "avgMinutesPerDay": stats.avg_minutes_per_day,
                },
                "summary": [
                    {
                        "name": s.name,
                        "totalMinutes": s.total_minutes,
                        "totalHours": format_duration(s.total_minutes),
                        "totalDays": s.total_days,
                    }
                    for s in report.summary
                ],
                "records": [record_to_dict(r) for r in report.records],
            }
        )

    @app.route("/api/reports/attendance.csv", methods=["GET"], endpoint="reports_attendance_csv")
    def reports_attendance_csv():
        today = format_date(reports.today())
        text = reports.export_attendance_csv(_criteria_from_args())
        return _csv_response(text, filename=f"attendance_report_{today}.csv")

    @app.route("/api/reports/personnel.csv", methods=["GET"], endpoint="reports_personnel_csv")
    def reports_personnel_csv():
        today = format_date(reports.today())
        return _csv_response(reports.export_personnel_csv(), filename=f"personnel_list_{today}.csv")

"""Ví dụ: dùng service layer (không qua Flask).

Tính báo cáo kỳ lương (chốt ngày 25) từ các bản ghi chấm công thô.
"""

import importlib

from config import get_settings_module

from src.timecard_engine.timecard_engine.container import build_container
from src.timecard_engine.timecard_engine.periods.model import PeriodRequest

RECORDS = [
    {"userId": "u1", "userName": "Sato", "type": "clock_in", "timestamp": "2025-01-15T09:05:00"},
    {"userId": "u1", "userName": "Sato", "type": "break_start", "timestamp": "2025-01-15T12:00:00"},
    {"userId": "u1", "userName": "Sato", "type": "break_end", "timestamp": "2025-01-15T12:50:00"},
    {"userId": "u1", "userName": "Sato", "type": "clock_out", "timestamp": "2025-01-15T19:00:00"},
    {"userId": "u1", "userName": "Sato", "type": "paid_leave", "timestamp": "2025-01-16T00:00:00"},
]


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    window = container.report_service.resolve_window(PeriodRequest(year=2025, month=1))
    report = container.report_service.build_period_report(records=RECORDS, window=window)
    for row in report.rows:
        print(row)


if __name__ == "__main__":
    main()

"""Timecard Engine package.

Organized by feature modules (events, schedules, worktime, periods, reports)
with a thin Flask controller layer over pure calculation services.
"""

import os


def env_list(name: str, default: str) -> list[str]:
    raw = os.environ.get(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    # Giờ làm việc mặc định (áp dụng khi nhân viên chưa có cấu hình riêng)
    DEFAULT_START_TIME = os.environ.get("DEFAULT_START_TIME", "09:00")
    DEFAULT_END_TIME = os.environ.get("DEFAULT_END_TIME", "18:00")
    DEFAULT_BREAK_MINUTES = int(os.environ.get("DEFAULT_BREAK_MINUTES", "60"))
    DEFAULT_STANDARD_WORK_HOURS = float(os.environ.get("DEFAULT_STANDARD_WORK_HOURS", "8"))
    LATE_GRACE_MINUTES = int(os.environ.get("LATE_GRACE_MINUTES", "0"))

    # Kỳ lương
    CLOSING_DAY = int(os.environ.get("CLOSING_DAY", "25"))
    EXPECTED_WORKING_DAYS = int(os.environ.get("EXPECTED_WORKING_DAYS", "20"))

    # Ngày nghỉ: weekday() của Python (0=Thứ hai ... 6=Chủ nhật), ngày lễ YYYY-MM-DD
    WEEKEND_DAYS = [int(d) for d in env_list("WEEKEND_DAYS", "5,6")]
    HOLIDAYS = env_list("HOLIDAYS", "")

    # Múi giờ IANA (vd. Asia/Tokyo) hoặc offset (+09:00) để quy đổi timestamp có offset; rỗng = múi giờ của máy chủ
    TIMEZONE = os.environ.get("TIMEZONE", "")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


SCHEDULE_DEFAULTS = {
    "startTime": Config.DEFAULT_START_TIME,
    "endTime": Config.DEFAULT_END_TIME,
    "breakTime": Config.DEFAULT_BREAK_MINUTES,
    "standardWorkTime": Config.DEFAULT_STANDARD_WORK_HOURS,
    "lateThreshold": Config.LATE_GRACE_MINUTES,
}

CLOSING_DAY = Config.CLOSING_DAY
EXPECTED_WORKING_DAYS = Config.EXPECTED_WORKING_DAYS
WEEKEND_DAYS = Config.WEEKEND_DAYS
HOLIDAYS = Config.HOLIDAYS
TIMEZONE = Config.TIMEZONE
LOG_LEVEL = Config.LOG_LEVEL

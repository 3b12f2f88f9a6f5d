from __future__ import annotations

from ..core.exceptions import ValidationError


def require_int_between(value, field_name: str, low: int, high: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ") from None
    if number < low or number > high:
        raise ValidationError(f"{field_name} phải nằm trong khoảng {low}-{high}")
    return number


def require_positive(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ") from None
    if number <= 0:
        raise ValidationError(f"{field_name} phải lớn hơn 0")
    return number

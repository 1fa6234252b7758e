"""
Formats locaux zh-CN / zh-CN locale formatting.
Montants en CNY et dates courtes, comme l'affichage du tableau de bord.
CNY amounts and short dates, as shown on the dashboard.
"""

from datetime import date


def format_currency(amount: float) -> str:
    """1234.5 -> '¥1,234.50', -5 -> '-¥5.00'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}¥{abs(amount):,.2f}"


def format_date(value: date | str) -> str:
    """2024-01-15 -> '2024年1月15日'."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return f"{value.year}年{value.month}月{value.day}日"


def format_liters(amount: float, digits: int = 1) -> str:
    return f"{amount:.{digits}f}L"


def format_odometer(km: int) -> str:
    return f"{km:,}km"

"""
Number formatting helpers for tables and documents
"""


def format_value(value: float, digits: int = 2) -> str:
    """Fixed-point text with exactly ``digits`` decimals"""
    return f"{value:.{digits}f}"


def format_coordinate(value: float) -> str:
    return format_value(value, 4)

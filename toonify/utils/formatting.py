"""Number formatting for CLI reports"""


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def format_number(num: int) -> str:
    return f"{num:,}"


def format_percentage(value: float) -> str:
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}%"

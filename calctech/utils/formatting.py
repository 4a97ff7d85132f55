def format_currency(amount):
    """Format amount as $X.XX or -$X.XX for negative values."""
    if amount is None:
        return ""
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def format_number(value, places=2):
    """Thousands separators and fixed decimals; non-numbers pass through."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    if isinstance(value, int):
        return f"{value:,}"
    return f"{value:,.{places}f}"


def format_percent(value, places=2):
    if value is None:
        return ""
    return f"{value:.{places}f}%"


def format_duration(total_seconds):
    """Race-time style: H:MM:SS when there are hours, otherwise M:SS."""
    total_seconds = int(total_seconds)
    hrs = total_seconds // 3600
    mins = (total_seconds % 3600) // 60
    secs = total_seconds % 60
    if hrs > 0:
        return f"{hrs}:{mins:02d}:{secs:02d}"
    return f"{mins}:{secs:02d}"


def format_clock(total_seconds):
    """Zero-padded HH:MM:SS. Hours are not wrapped at 24."""
    total_seconds = int(total_seconds)
    hrs = total_seconds // 3600
    mins = (total_seconds % 3600) // 60
    secs = total_seconds % 60
    return f"{hrs:02d}:{mins:02d}:{secs:02d}"

"""Human-readable duration formatting."""


def format_duration(seconds: int) -> str:
    """Format whole seconds as seconds, minutes, or hours and minutes.

    Minutes and hours are truncated, never rounded.
    """
    if seconds < 60:
        return f"{seconds} seconds"
    if seconds < 3600:
        return f"{seconds // 60} minutes"
    return f"{seconds // 3600} hours and {(seconds % 3600) // 60} minutes"

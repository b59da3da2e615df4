"""Formatting helpers for route summaries."""


def format_cost(cost: float) -> str:
    """
    Format a cost in dollars with thousand separators and no decimals.

    Examples:
        >>> format_cost(2510)
        '$2,510'
        >>> format_cost(299.6)
        '$300'
    """
    return f"${cost:,.0f}"


def format_distance(miles: float) -> str:
    """
    Format a distance in miles.

    Examples:
        >>> format_distance(2475)
        '2,475 miles'
    """
    return f"{miles:,.0f} miles"


def format_duration(hours: float) -> str:
    """
    Format a duration given in hours as hours and minutes.

    Examples:
        >>> format_duration(5.5)
        '5h 30m'
        >>> format_duration(0.4)
        '0h 24m'
    """
    total_minutes = int(round(hours * 60))
    return f"{total_minutes // 60}h {total_minutes % 60}m"

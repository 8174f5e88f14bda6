"""Human-readable distances.

Picks a natural unit for the magnitude, the way map apps show
distances: meters up close, kilometers further out (or feet and
miles for imperial readers).
"""

from __future__ import annotations

from .domain.models import LengthUnit, Measurement

_FEET_CUTOFF_MILES = 0.1


def format_distance(measurement: Measurement, metric: bool = True) -> str:
    """Format a length in its natural unit.

    Args:
        measurement: The length to format, in any unit.
        metric: Use m/km when True, ft/mi otherwise.

    Returns:
        A short label such as '850 m', '1.4 km', '320 ft' or '1.2 mi'.
    """
    if metric:
        meters = measurement.converted(LengthUnit.METERS).value
        if round(meters) < 1000:
            return f"{meters:.0f} {LengthUnit.METERS.symbol}"
        km = measurement.converted(LengthUnit.KILOMETERS).value
        return f"{km:.1f} {LengthUnit.KILOMETERS.symbol}"

    miles = measurement.converted(LengthUnit.MILES).value
    if miles < _FEET_CUTOFF_MILES:
        feet = measurement.converted(LengthUnit.FEET).value
        return f"{feet:.0f} {LengthUnit.FEET.symbol}"
    return f"{miles:.1f} {LengthUnit.MILES.symbol}"

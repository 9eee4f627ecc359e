"""Conversion between percentage volume and receiver device units.

Device units are tenths of a dB. The receiver only accepts levels on
0.5 dB steps, so every value sent must be a multiple of ``VOLUME_STEP``.
"""

import math

VOLUME_MAX = 970
VOLUME_OFFSET = 805
VOLUME_STEP = 5


def percent_to_device_units(percent: float) -> int:
    """Convert a 0-100 percentage to a device volume level.

    The result is rounded half-up onto the 0.5 dB grid. ``percent`` is
    expected to be within 0-100 and is not range checked.
    """
    units = math.floor(VOLUME_MAX * (percent / 100) - VOLUME_OFFSET)
    diff = units % VOLUME_STEP
    if diff < VOLUME_STEP / 2:
        return units - diff
    return units + (VOLUME_STEP - diff)


def device_units_to_percent(units: int) -> float:
    """Convert a device volume level to a percentage (4 significant digits)."""
    percent = (units + VOLUME_OFFSET) / (VOLUME_MAX / 100)
    return float(f"{percent:.4g}")

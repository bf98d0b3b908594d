"""
Threshold color scales for grid values.
"""

from typing import Dict, List, Optional, Tuple


# (upper bound inclusive, color); the last entry's bound is None (catch-all)
ColorScale = List[Tuple[Optional[float], str]]

TEMPERATURE_SCALE: ColorScale = [
    (-20, "#1a0066"),
    (-15, "#2e1a66"),
    (-10, "#0033cc"),
    (-5, "#0066ff"),
    (0, "#00ccff"),
    (5, "#00ff99"),
    (10, "#66ff66"),
    (15, "#ccff33"),
    (20, "#ffff00"),
    (25, "#ffcc00"),
    (30, "#ff9900"),
    (None, "#ff0000"),
]

# Snow depth in cm
SNOW_SCALE: ColorScale = [
    (0, "#00000000"),
    (1, "#e6f2ff"),
    (5, "#cce5ff"),
    (10, "#99ccff"),
    (20, "#66b3ff"),
    (30, "#3399ff"),
    (50, "#0080ff"),
    (None, "#0066cc"),
]

# Precipitation in mm
PRECIPITATION_SCALE: ColorScale = [
    (0, "#00000000"),
    (0.1, "#d4f0ff"),
    (0.5, "#99d6ff"),
    (1, "#66c2ff"),
    (2, "#33adff"),
    (5, "#0099ff"),
    (10, "#0077cc"),
    (None, "#005599"),
]

COLOR_SCALES: Dict[str, ColorScale] = {
    "temperature": TEMPERATURE_SCALE,
    "snow": SNOW_SCALE,
    "precipitation": PRECIPITATION_SCALE,
}


def color_for(value: Optional[float], scale: str = "temperature") -> Optional[str]:
    """
    Map a value to a color on a named threshold scale.

    Returns:
        Hex color, or None for a missing value

    Raises:
        KeyError: If the scale name is unknown
    """
    thresholds = COLOR_SCALES[scale]
    if value is None:
        return None
    for bound, color in thresholds:
        if bound is None or value <= bound:
            return color
    return thresholds[-1][1]


def interpolate_color(color1: str, color2: str, factor: float) -> str:
    """
    Interpolate linearly between two '#rrggbb' colors.

    Args:
        color1: Start color
        color2: End color
        factor: Interpolation factor, clamped to 0-1
    """
    factor = min(max(factor, 0.0), 1.0)
    c1 = int(color1[1:7], 16)
    c2 = int(color2[1:7], 16)

    r1, g1, b1 = (c1 >> 16) & 0xFF, (c1 >> 8) & 0xFF, c1 & 0xFF
    r2, g2, b2 = (c2 >> 16) & 0xFF, (c2 >> 8) & 0xFF, c2 & 0xFF

    # halves round up
    r = int(r1 + factor * (r2 - r1) + 0.5)
    g = int(g1 + factor * (g2 - g1) + 0.5)
    b = int(b1 + factor * (b2 - b1) + 0.5)

    return f"#{r:02x}{g:02x}{b:02x}"

"""Visual encoding - Pure functions.

This module maps earthquake attributes to visual properties:
magnitude drives circle size, depth drives color. The actual drawing
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass


# Circle size grows as magnitude ** MAGNITUDE_EXPONENT (in metres).
# M6 is already ~280 km, so large events dominate the view.
MAGNITUDE_EXPONENT = 7

# Size used for zero or negative magnitudes
MIN_MARKER_SIZE = 1


@dataclass(frozen=True)
class DepthBucket:
    """One depth range and its display color.

    Attributes:
        max_depth_km: Inclusive upper bound, None for the open-ended last bucket
        color: Hex color string
        label: Legend label for the range
    """
    max_depth_km: float | None
    color: str
    label: str


# Ascending, first match wins
DEPTH_BUCKETS: tuple[DepthBucket, ...] = (
    DepthBucket(10, "#98EE00", "-10 to 10"),   # green
    DepthBucket(30, "#D4EE00", "10 to 30"),    # yellow-green
    DepthBucket(50, "#EECC00", "30 to 50"),    # yellow
    DepthBucket(70, "#EE9C00", "50 to 70"),    # orange
    DepthBucket(90, "#EA822C", "70 to 90"),    # orange-red
    DepthBucket(None, "#EA2C2C", "90+"),       # red
)


def get_marker_size(magnitude: float) -> float:
    """Determine circle size based on magnitude.

    Pure function. Positive magnitudes are raised to the seventh power;
    anything else gets the minimum size. No clamping is applied.

    Args:
        magnitude: Earthquake magnitude

    Returns:
        Circle radius in metres
    """
    if magnitude > 0:
        return magnitude ** MAGNITUDE_EXPONENT
    return MIN_MARKER_SIZE


def get_depth_color(depth_km: float) -> str:
    """Get hex color for depth visualization.

    Pure function. Bucket upper bounds are inclusive, so a depth of
    exactly 10 km is still green.

    Args:
        depth_km: Hypocenter depth in kilometers

    Returns:
        Hex color string (e.g., "#98EE00")
    """
    for bucket in DEPTH_BUCKETS:
        if bucket.max_depth_km is None or depth_km <= bucket.max_depth_km:
            return bucket.color
    return DEPTH_BUCKETS[-1].color


def get_legend_entries() -> list[tuple[str, str]]:
    """Return (color, label) pairs for the depth legend, shallowest first."""
    return [(bucket.color, bucket.label) for bucket in DEPTH_BUCKETS]

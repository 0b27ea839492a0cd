"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


EARTHQUAKE_FEED_URL = (
    "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_week.geojson"
)
PLATES_FEED_URL = (
    "https://raw.githubusercontent.com/fraxen/tectonicplates/"
    "master/GeoJSON/PB2002_boundaries.json"
)

OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    "contributors"
)
OPENTOPOMAP_ATTRIBUTION = (
    'Map data: &copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
    'contributors, <a href="http://viewfinderpanoramas.org">SRTM</a> | '
    'Map style: &copy; <a href="https://opentopomap.org">OpenTopoMap</a> '
    '(<a href="https://creativecommons.org/licenses/by-sa/3.0/">CC-BY-SA</a>)'
)

# Overlay names, also used as layer-switcher labels
MARKERS_LAYER = "Earthquake Markers"
HEATMAP_LAYER = "Heatmap"
CIRCLES_LAYER = "Circles"
PLATES_LAYER = "Tectonic Plates"
OVERLAY_NAMES = (MARKERS_LAYER, HEATMAP_LAYER, CIRCLES_LAYER, PLATES_LAYER)

LEGEND_POSITIONS = ("topleft", "topright", "bottomleft", "bottomright")


@dataclass(frozen=True)
class TileLayerConfig:
    """A base map tile source.

    Attributes:
        name: Layer-switcher label
        url: Tile URL template
        attribution: Attribution HTML shown on the map
    """
    name: str
    url: str
    attribution: str


def _default_base_layers() -> list[TileLayerConfig]:
    return [
        TileLayerConfig(
            name="Street View",
            url="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
            attribution=OSM_ATTRIBUTION,
        ),
        TileLayerConfig(
            name="Topography",
            url="https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png",
            attribution=OPENTOPOMAP_ATTRIBUTION,
        ),
    ]


@dataclass
class FeedConfig:
    """Where to fetch data from.

    Attributes:
        earthquake_url: USGS GeoJSON summary feed
        plates_url: Tectonic plate boundary GeoJSON
        timeout_seconds: Per-request timeout
    """
    earthquake_url: str = EARTHQUAKE_FEED_URL
    plates_url: str = PLATES_FEED_URL
    timeout_seconds: int = 30


@dataclass
class ViewConfig:
    """Initial map view.

    Attributes:
        center_latitude: Initial center latitude
        center_longitude: Initial center longitude
        zoom: Initial zoom level
        visible_overlays: Overlays switched on when the page loads
    """
    center_latitude: float = 40.7
    center_longitude: float = -94.5
    zoom: int = 3
    visible_overlays: list[str] = field(
        default_factory=lambda: [MARKERS_LAYER, PLATES_LAYER]
    )

    @property
    def center(self) -> list[float]:
        """Return [latitude, longitude] list."""
        return [self.center_latitude, self.center_longitude]


@dataclass
class HeatConfig:
    """Heat layer kernel settings."""
    radius: int = 25
    blur: int = 20


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feeds: Data sources
        view: Initial map view
        base_layers: Mutually exclusive base maps, first one is the default
        heat: Heat layer settings
        circle_fill_opacity: Fill opacity for depth circles
        legend_position: Map corner holding the depth legend
        output_path: Where the CLI writes the page
    """
    feeds: FeedConfig = field(default_factory=FeedConfig)
    view: ViewConfig = field(default_factory=ViewConfig)
    base_layers: list[TileLayerConfig] = field(default_factory=_default_base_layers)
    heat: HeatConfig = field(default_factory=HeatConfig)
    circle_fill_opacity: float = 0.75
    legend_position: str = "bottomright"
    output_path: str = "earthquakes.html"


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    for name, url in (
        ("feeds.earthquake_url", config.feeds.earthquake_url),
        ("feeds.plates_url", config.feeds.plates_url),
    ):
        if not url.startswith(("http://", "https://")):
            errors.append(ValidationError(
                field=name,
                message=f"Feed URL must be http(s), got '{url}'",
            ))

    if config.feeds.timeout_seconds <= 0:
        errors.append(ValidationError(
            field="feeds.timeout_seconds",
            message=f"Timeout must be positive, got {config.feeds.timeout_seconds}",
        ))

    errors.extend(validate_coordinates(
        config.view.center_latitude,
        config.view.center_longitude,
        "view.center",
    ))

    if not 0 <= config.view.zoom <= 18:
        errors.append(ValidationError(
            field="view.zoom",
            message=f"Zoom {config.view.zoom} out of range [0, 18]",
        ))

    for name in config.view.visible_overlays:
        if name not in OVERLAY_NAMES:
            errors.append(ValidationError(
                field="view.visible_overlays",
                message=f"Unknown overlay '{name}', expected one of {', '.join(OVERLAY_NAMES)}",
                severity="warning",
            ))

    if not config.base_layers:
        errors.append(ValidationError(
            field="base_layers",
            message="At least one base layer is required",
        ))

    names = [layer.name for layer in config.base_layers]
    if len(names) != len(set(names)):
        errors.append(ValidationError(
            field="base_layers",
            message="Base layer names must be unique",
        ))

    if not 0 <= config.circle_fill_opacity <= 1:
        errors.append(ValidationError(
            field="circle_fill_opacity",
            message=f"Opacity {config.circle_fill_opacity} out of range [0, 1]",
        ))

    if config.legend_position not in LEGEND_POSITIONS:
        errors.append(ValidationError(
            field="legend_position",
            message=f"Unknown legend position '{config.legend_position}'",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )

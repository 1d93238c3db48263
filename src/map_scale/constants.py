"""Shared numeric constants for distance, unit and placement math."""

from __future__ import annotations


# Spherical Earth (WGS84 equatorial radius), meters.
EARTH_RADIUS_M = 6378137.0
# Meters to statute miles.
MILES_PER_METER = 0.000621371192
# Feet tier threshold and the meters-per-foot used for the drawn bar length.
METERS_PER_FOOT = 0.3048
# Divisor used when converting the target length into feet/inches for the label.
FOOT_LABEL_DIVISOR = 0.30482
INCHES_PER_FOOT = 12

# Width fraction bounds and defaults.
MIN_WIDTH_FRACTION = 0.1
MAX_WIDTH_FRACTION = 0.9
DEFAULT_WIDTH_FRACTION = 0.2
DEFAULT_LOCATION = "se"
DEFAULT_UNITS = "si"

# Baseline insets as fractions of the view extent.
SOUTH_INSET = 0.05
NORTH_INSET = 0.08
SIDE_INSET = 0.05
# Box margins around the baseline; extra headroom above holds the label.
BOX_MARGIN_LON = 0.02
BOX_MARGIN_BELOW = 0.02
BOX_MARGIN_ABOVE = 0.05
# Label lift above the box center, fraction of the latitude extent.
LABEL_OFFSET = 0.01
# Font points per inch of container height.
FONT_SCALE = 2.3

# Reserved gid carried by every overlay artist.
SCALE_TAG = "MapScale"

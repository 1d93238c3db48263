import os

import matplotlib
import pytest

# Headless backend for CI and local runs.
os.environ.setdefault("MPLBACKEND", "Agg")
matplotlib.use(os.environ.get("MPLBACKEND", "Agg"), force=True)

import matplotlib.pyplot as plt  # noqa: E402

from map_scale.distance import ViewBounds  # noqa: E402


@pytest.fixture
def conus_bounds() -> ViewBounds:
    """10 x 10 degree view centered on 35N, 95W."""
    return ViewBounds(lat_min=30.0, lat_max=40.0, lon_min=-100.0, lon_max=-90.0)


@pytest.fixture
def geo_axes():
    fig, ax = plt.subplots(figsize=(6.0, 4.0))
    ax.set_xlim(-100.0, -90.0)
    ax.set_ylim(30.0, 40.0)
    yield ax
    plt.close(fig)

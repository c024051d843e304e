# Ensure `src/` is on sys.path so tests can import `tornado_watch` without requiring editable install
import json
import os
import sys

import pytest

HERE = os.path.dirname(__file__)
SRC = os.path.abspath(os.path.join(HERE, "..", "src"))
if os.path.isdir(SRC) and SRC not in sys.path:
    sys.path.insert(0, SRC)


def make_feature(event, effective, area_desc="Weld, CO", severity="Extreme", urgency="Immediate"):
    """Build one GeoJSON alert feature the way the NWS feed lays it out."""
    return {
        "id": f"https://api.weather.gov/alerts/{event}-{effective}",
        "type": "Feature",
        "geometry": None,
        "properties": {
            "@type": "wx:Alert",
            "event": event,
            "severity": severity,
            "urgency": urgency,
            "areaDesc": area_desc,
            "effective": effective,
            "certainty": "Observed",
        },
    }


def make_feed(*features):
    return json.dumps({"type": "FeatureCollection", "features": list(features)})


@pytest.fixture
def tornado_feature():
    return make_feature("Tornado Warning", "2024-06-15T20:00:00Z")


@pytest.fixture
def flood_feature():
    return make_feature("Flood Warning", "2024-06-15T19:30:00Z", area_desc="Larimer, CO", severity="Moderate", urgency="Expected")


@pytest.fixture
def mixed_feed(tornado_feature, flood_feature):
    return make_feed(tornado_feature, flood_feature)

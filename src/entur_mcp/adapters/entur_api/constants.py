"""Constants for the Entur API adapters.

Geocoder documentation: https://developer.entur.org/pages-geocoder-intro
Journey Planner v3 documentation: https://developer.entur.org/pages-journeyplanner-journeyplanner

Entur asks every client to identify itself with the ET-Client-Name header.
"""

# API endpoints
GEOCODER_URL = "https://api.entur.io/geocoder/v1/autocomplete"  # GET ?text=...&lang=...&size=...
JOURNEY_PLANNER_URL = "https://api.entur.io/journey-planner/v3/graphql"  # POST {query, variables}

# Client identification
ET_CLIENT_NAME_HEADER = "ET-Client-Name"
DEFAULT_ET_CLIENT_NAME = "openclaw-entur-test"

# Service labels used in error messages
GEOCODER_SERVICE = "Entur Geocoder"
JOURNEY_PLANNER_SERVICE = "Journey Planner"

# Geocoder result size bounds
DEFAULT_STOP_RESULTS = 10
MIN_STOP_RESULTS = 1
MAX_STOP_RESULTS = 100

# Journey planner trip pattern bounds
DEFAULT_TRIP_PATTERNS = 5
MIN_TRIP_PATTERNS = 1
MAX_TRIP_PATTERNS = 20

# Geocoder signals: category values and mode keys
RAIL_CATEGORIES = frozenset({"railStation"})
BUS_CATEGORIES = frozenset({"busStation", "onstreetBus"})
RAIL_MODE_KEY = "rail"
BUS_MODE_KEY = "bus"

# Journey planner transport mode for each single-mode filter
JOURNEY_MODE_MAP = {
    "train": "rail",
    "bus": "bus",
}

# Leg mode when upstream omits it
UNKNOWN_LEG_MODE = "unknown"

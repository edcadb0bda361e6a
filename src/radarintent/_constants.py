"""Internal constants shared across the library."""

SHOW_RADAR_ACTION = "com.google.android.radar.SHOW_RADAR"

# Extra keys carried by SHOW_RADAR messages.
LATITUDE_KEY = "latitude"
LONGITUDE_KEY = "longitude"
ALTITUDE_KEY = "altitude"

GEO_URI_SCHEME = "geo"

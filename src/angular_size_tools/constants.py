"""Fixed constants: body radii, month table, unit conversions, request defaults."""

import math

# Mean radii of the major bodies (km)
PLANET_RADII_KM: dict[str, float] = {
    'mercury': 2439.7,
    'venus': 6051.8,
    'earth': 6371.0,
    'mars': 3389.5,
    'jupiter': 69911.0,
    'saturn': 58232.0,
    'uranus': 25362.0,
    'neptune': 24622.0,
    'pluto': 1188.0,
}

# Ephemeris month abbreviation -> two-digit month number
MONTH_NUMBERS: dict[str, str] = {
    'Jan': '01',
    'Feb': '02',
    'Mar': '03',
    'Apr': '04',
    'May': '05',
    'Jun': '06',
    'Jul': '07',
    'Aug': '08',
    'Sep': '09',
    'Oct': '10',
    'Nov': '11',
    'Dec': '12',
}

# Era marker written in front of ephemeris dates (e.g. "A.D. 2020-Jan-01")
ERA_AD = 'A.D.'
ERA_BC = 'B.C.'

# Angle conversions
ARCSEC_PER_DEGREE = 3600.0
RAD_TO_ARCSEC = 180.0 / math.pi * ARCSEC_PER_DEGREE
ANGLE_UNIT = 'arcsec'

# Request defaults: Earth observing Mars
DEFAULT_OBSERVER = 'earth'
DEFAULT_TARGET = 'mars'
DEFAULT_YEARS = 10
MAX_YEARS = 100

# Body data files
MANIFEST_FILENAME = 'manifest.json'
BODY_FILE_SUFFIX = '.json'

"""
Application-wide constants for the weather reports.

This module defines default values used when the configuration file leaves
a setting out. Report layouts and localized tokens live here as well.
"""

# Local timezone used for calendar days and time-of-day parsing
DEFAULT_TIMEZONE = "Europe/Brussels"

# Sunrise/sunset source
SUN_URL_TEMPLATE = "https://www.astro.oma.be/GENERAL/INFO/nzon/zon_{year}.html"
SUN_FROM_YEAR = 2011
SUN_TO_YEAR = 2022
SUN_OUTPUT_DIR = "./data/sunrise_sunset"
SUN_FILE_TEMPLATE = "sun_{year}.csv"
SUN_ROW_COLUMNS = 6
SUN_DATE_FORMAT = "%d %m %Y"
SUN_TIME_FORMAT = "%H:%M"
MIN_DURATION_MINUTES = 1
MAX_DURATION_MINUTES = 120

SUN_CSV_HEADER = [
    "date",
    "sunrise_start",
    "sunrise_end",
    "sunset_start",
    "sunset_end",
    "duration_minutes",
]

# HTTP
HTTP_TIMEOUT = 30  # seconds
HTTP_MAX_RETRIES = 0

# Rain analysis
DATABASE_PATH = "analysis.sqlite3"
RAIN_TABLE = "rain"
RAIN_THRESHOLD_MM = 0.1
DAYTIME_START_HOUR = 7  # inclusive, local time
DAYTIME_END_HOUR = 23  # exclusive, local time

# Weekday numbering: Sunday=0 .. Saturday=6
SUNDAY = 0
SATURDAY = 6
WEEKEND_DAYS = (SUNDAY, SATURDAY)

# Years with fewer days than this get a small-sample warning
FULL_YEAR_DAYS = 365

REPORT_DIR = "./reports"
REPORT_FILE = "week_vs_weekday.csv"

# Report header and yes/no tokens per language
REPORT_LOCALES = {
    "en": {
        "header": [
            "year",
            "chance_of_rain_total",
            "chance_of_rain_week",
            "chance_of_rain_weekend",
            "more_rain_on_weekend",
            "daytime_chance_of_rain_total",
            "daytime_chance_of_rain_week",
            "daytime_chance_of_rain_weekend",
            "daytime_more_rain_on_weekend",
        ],
        "yes": "yes",
        "no": "no",
    },
    "nl": {
        "header": [
            "jaar",
            "kans_op_regen_totaal",
            "kans_op_regen_week",
            "kans_op_regen_weekend",
            "meer_kans_op_regen_weekend",
            "dag_kans_op_regen_totaal",
            "dag_kans_op_regen_week",
            "dag_kans_op_regen_weekend",
            "dag_meer_kans_op_regen_weekend",
        ],
        "yes": "ja",
        "no": "nee",
    },
}
DEFAULT_LANGUAGE = "en"

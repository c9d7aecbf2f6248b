"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

VACATION_DAY_HOURS = 8
MINUTES_PER_HOUR = 60

MONTH_KEY_FORMAT = "%Y-%m"
ISO_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_LIST_LIMIT = 200

SPREADSHEET_TOTAL_LABEL = "TOTALE"
PRINTABLE_TOTAL_LABEL = "Sommatoria"

ITALIAN_DAY_NAMES = ("lunedì", "martedì", "mercoledì", "giovedì", "venerdì", "sabato", "domenica")
ITALIAN_DAY_ABBREVIATIONS = ("lun", "mar", "mer", "gio", "ven", "sab", "dom")
ITALIAN_MONTH_NAMES = (
    "gennaio",
    "febbraio",
    "marzo",
    "aprile",
    "maggio",
    "giugno",
    "luglio",
    "agosto",
    "settembre",
    "ottobre",
    "novembre",
    "dicembre",
)

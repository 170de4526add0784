"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULTER_THRESHOLD = 80.0
RECORD_SEPARATOR = "---"
FIELD_SEPARATOR = ","
DEFAULT_DATA_FILE = "students.txt"

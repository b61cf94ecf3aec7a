"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_DATA_FILE = "data/attendance.json"
ATTENDANCE_TABLE = "attendance_data"

# Used to match every row in "delete all" since the query builder needs a filter.
NIL_UUID = "00000000-0000-0000-0000-000000000000"

GOOD_ATTENDANCE_PERCENT = 75.0
WARNING_ATTENDANCE_PERCENT = 60.0
HIGH_BAND_PERCENT = 80.0
GOOD_SUBJECT_RATIO = 0.75

# Percentages are shown with two decimals, halves rounded up.
PERCENT_QUANTUM = Decimal("0.01")

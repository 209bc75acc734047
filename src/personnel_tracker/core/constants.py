"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DATE_FORMAT = "%d.%m.%Y"
TIME_FORMAT = "%H:%M"
ISO_DATE_FORMAT = "%Y-%m-%d"

PERSONNEL_KEY = "personnel_data"
ATTENDANCE_KEY = "attendance_data"
DEPARTMENT_KEY = "department_data"

CSV_DELIMITER = ","
OPEN_SESSION_LABEL = "in progress"
EMPTY_FIELD_LABEL = "-"

DEFAULT_DEPARTMENTS = (
    ("1", "Management", "Management department"),
    ("2", "Human Resources", "HR department"),
    ("3", "Information Technology", "IT department"),
    ("4", "Sales", "Sales department"),
    ("5", "Marketing", "Marketing department"),
)

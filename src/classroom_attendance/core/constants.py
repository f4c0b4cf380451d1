"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"

# Milliseconds each store call took against the mock backend.
STUDENT_LATENCY_MS = {
    "get_all": 300,
    "get_by_id": 200,
    "create": 400,
    "update": 350,
    "delete": 300,
}

ATTENDANCE_LATENCY_MS = {
    "get_all": 300,
    "get_today_attendance": 250,
    "get_by_id": 200,
    "create": 300,
    "update": 250,
    "delete": 300,
    "get_attendance_stats": 400,
    "get_monthly_attendance": 350,
    "get_analytics": 500,
    "get_reports": 400,
    "get_student_attendance": 300,
}

# Present-rate thresholds (percent) for roster standing badges.
STANDING_EXCELLENT = 90
STANDING_GOOD = 80
STANDING_WARNING = 70

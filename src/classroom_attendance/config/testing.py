SECRET_KEY = "test-secret"

STUDENTS_FIXTURE = ""
ATTENDANCE_FIXTURE = ""

LATENCY_SCALE = 0.0

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

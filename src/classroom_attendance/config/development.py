import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Fixture overrides; empty means the JSON bundled with the package
STUDENTS_FIXTURE = os.getenv("STUDENTS_FIXTURE", "")
ATTENDANCE_FIXTURE = os.getenv("ATTENDANCE_FIXTURE", "")

# 1.0 replays the mock backend delays, 0 disables them
LATENCY_SCALE = float(os.getenv("LATENCY_SCALE", "1.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STUDENTS_FIXTURE = os.getenv("STUDENTS_FIXTURE", "")
ATTENDANCE_FIXTURE = os.getenv("ATTENDANCE_FIXTURE", "")

LATENCY_SCALE = float(os.getenv("LATENCY_SCALE", "0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False

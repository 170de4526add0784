import os

DATA_FILE = os.getenv("ATTENDANCE_DATA_FILE", "students.test.txt")

DEBUG = False

GROUP_RECORDS_ON_LOAD = bool(int(os.getenv("GROUP_RECORDS_ON_LOAD", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

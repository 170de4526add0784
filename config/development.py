import os

# Flat file holding the persisted roster
DATA_FILE = os.getenv("ATTENDANCE_DATA_FILE", "students.txt")

DEBUG = bool(int(os.getenv("DEBUG", "0")))

# Attach record lines to the name above them when reloading (corrected reader)
GROUP_RECORDS_ON_LOAD = bool(int(os.getenv("GROUP_RECORDS_ON_LOAD", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

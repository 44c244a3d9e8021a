from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

SPREADSHEET_ID = "test-attendance"
CLASS_SHEETS = ("Class1", "Class2", "Class3")
DATA_SHEET_ID = "test-posts"
SUPPORT_SHEET_ID = "test-support"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

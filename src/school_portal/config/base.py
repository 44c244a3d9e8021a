import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Relational store: Student-info, Student_Marks
DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_db"),
}

# Google service account: inline JSON wins over a key file path.
GOOGLE_CREDENTIALS = os.getenv("GOOGLE_CREDENTIALS", "")
GOOGLE_CREDENTIALS_FILE = os.getenv("GOOGLE_CREDENTIALS_FILE", "")

# Attendance spreadsheet, one tab per class (searched in this order)
SPREADSHEET_ID = os.getenv("SPREADSHEET_ID", "")
CLASS_SHEETS = tuple(s.strip() for s in os.getenv("CLASS_SHEETS", "Class1,Class2,Class3").split(",") if s.strip())
ATTENDANCE_RANGE = os.getenv("ATTENDANCE_RANGE", "A1:Z")

# Posts feed and support form sheets
DATA_SHEET_ID = os.getenv("DATA_SHEET_ID", "")
SUPPORT_SHEET_ID = os.getenv("SHEET_ID", "")

SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
EMAIL_USER = os.getenv("EMAIL_USER", "")
EMAIL_PASSWORD = os.getenv("EMAIL_PASSWORD", "")

UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "media")
MEDIA_URL_PREFIX = os.getenv("MEDIA_URL_PREFIX", "/media")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False

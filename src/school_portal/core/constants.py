"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Class sheet layout: roll number, student name, unused, section.
METADATA_COLUMNS = 4

DEFAULT_CLASS_SHEETS = ("Class1", "Class2", "Class3")
DEFAULT_ATTENDANCE_RANGE = "A1:Z"

POSTS_RANGE = "Sheet1!A:C"
SUPPORT_APPEND_RANGE = "Sheet1!B2"
SUPPORT_RECIPIENT_CELLS = ("Sheet1!A1", "Sheet1!A2", "Sheet1!A3")

UPLOADS_FOLDER = "uploads"
CLASS_TIMETABLES_FOLDER = "Class_Timetables"
EXAM_TIMETABLES_FOLDER = "Exam_Timetables"
ALLOWED_UPLOAD_EXTENSIONS = frozenset({"jpg", "png"})
MAX_GALLERY_IMAGES = 30

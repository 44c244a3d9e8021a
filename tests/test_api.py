from __future__ import annotations

import io

import pytest

from school_portal.attendance.service import AttendanceAggregator
from school_portal.attendance.sheet_index import SheetRowIndex
from school_portal.container import Container
from school_portal.core.exceptions import DeliveryError
from school_portal.main import create_app
from school_portal.media.local_storage import LocalMediaStorage
from school_portal.media.model import MediaConfig
from school_portal.media.service import MediaService
from school_portal.posts.service import PostService
from school_portal.sheets.model import SheetsConfig
from school_portal.students.model import FeeStatus
from school_portal.students.service import StudentService
from school_portal.support.service import SupportService

HEADER = ["Roll", "Name", "X", "Section", "2024-01-01", "2024-01-02"]


class InMemoryStudents:
    def __init__(self, students):
        self.students = students

    def get_by_roll_number(self, roll_number):
        s = self.students.get(roll_number)
        return dict(s) if s else None

    def get_exam_marks(self, roll_number):
        return []

    def get_fee_status(self, roll_number):
        s = self.students.get(roll_number)
        return FeeStatus(roll_number=roll_number, fee_status=s["feeStatus"]) if s else None


class Mailer:
    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    def send(self, to, subject, text):
        if self.fail:
            raise DeliveryError("relay down")
        self.sent.append(to)


@pytest.fixture
def sheets(fake_sheets):
    return fake_sheets(
        {
            "Class1!A1:Z": [HEADER, ["R7", "Bob", "", "B", "Absent", "Absent"]],
            "Class2!A1:Z": [HEADER, ["R1", "Alice", "", "A", "Present", "Absent"]],
            "Sheet1!A:C": [["Sports day", "Friday", "2024-02-01"]],
            "Sheet1!A1": [["ops@school.edu"]],
        }
    )


@pytest.fixture
def mailer():
    return Mailer()


@pytest.fixture
def client(monkeypatch, tmp_path, sheets, mailer):
    monkeypatch.setenv("APP_ENV", "testing")

    sheets_config = SheetsConfig(spreadsheet_id="sid", class_sheets=("Class1", "Class2"))
    media_config = MediaConfig(root_dir=str(tmp_path), url_prefix="/media")
    storage = LocalMediaStorage(media_config)
    students = InMemoryStudents({"R1": {"rollNumber": "R1", "firstName": "Alice", "parentContact": "999", "feeStatus": "Paid"}})

    container = Container(
        conn=None,
        sheets_config=sheets_config,
        media_config=media_config,
        students_repo=students,
        sheets_client=sheets,
        media_storage=storage,
        attendance_service=AttendanceAggregator(SheetRowIndex(sheets, sheets_config), sheets_config),
        student_service=StudentService(students),
        media_service=MediaService(storage),
        post_service=PostService(sheets, "posts"),
        support_service=SupportService(sheets, "support", mailer),
    )
    app = create_app(container=container)
    return app.test_client()


def test_attendance_by_roll_number(client):
    resp = client.post("/attendance/rollNumber", json={"rollNumber": "R1"})

    assert resp.status_code == 200
    assert resp.get_json() == {
        "success": True,
        "attendanceData": {
            "classSheet": "Class2",
            "rollNumber": "R1",
            "studentName": "Alice",
            "section": "A",
            "attendance": [
                {"date": "2024-01-01", "status": "Present"},
                {"date": "2024-01-02", "status": "Absent"},
            ],
        },
    }


def test_attendance_latest(client):
    resp = client.post("/attendance/latest", json={"rollNumber": "R1"})

    data = resp.get_json()["latestAttendanceData"]
    assert data["latestDate"] == "2024-01-02"
    assert data["latestAttendanceStatus"] == "Absent"
    assert data["classSheet"] == "Class2"


def test_attendance_tracker(client):
    resp = client.post("/attendance/tracker", json={"rollNumber": "R1"})

    assert resp.get_json() == {"success": True, "totalDays": 2, "daysPresent": 1, "attendancePercentage": "50.00"}


@pytest.mark.parametrize("path", ["/attendance/rollNumber", "/attendance/latest", "/attendance/tracker"])
def test_attendance_errors(client, sheets, path):
    missing = client.post(path, json={})
    assert missing.status_code == 400
    assert missing.get_json() == {"error": "Missing required field: rollNumber"}
    assert sheets.calls == []

    unknown = client.post(path, json={"rollNumber": "R404"})
    assert unknown.status_code == 404
    assert unknown.get_json() == {"error": "Student not found in any class sheet."}


def test_attendance_remote_failure_is_500(client, sheets):
    sheets.fail_on.add("Class1!A1:Z")

    resp = client.post("/attendance/rollNumber", json={"rollNumber": "R1"})

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to fetch attendance report"}


def test_login(client):
    ok = client.post("/login", json={"rollNumber": "R1", "password": "999"})
    assert ok.status_code == 200
    assert ok.get_json()["firstName"] == "Alice"

    assert client.post("/login", json={"rollNumber": "R1", "password": "000"}).status_code == 401
    assert client.post("/login", json={"rollNumber": "R2", "password": "999"}).status_code == 404


def test_student_report_and_fees(client):
    assert client.get("/student/R1").get_json()["feeStatus"] == "Paid"
    assert client.get("/feeStatus/R1").get_json() == {"feeStatus": "Paid"}
    assert client.get("/feeStatus/R2").status_code == 404

    report = client.get("/report/R1")
    assert report.status_code == 404
    assert report.get_json() == {"message": "No exam reports found for roll number R1"}


def test_posts(client, sheets):
    assert client.get("/get-posts").get_json() == [
        {"title": "Sports day", "description": "Friday", "timestamp": "2024-02-01"}
    ]

    sheets.ranges["Sheet1!A:C"] = []
    empty = client.get("/get-posts")
    assert empty.status_code == 200
    assert empty.get_data(as_text=True) == "No posts found."


def test_support_submit(client, sheets, mailer):
    resp = client.post("/submit", json={"first_name": "Asha", "email": "asha@example.com"})

    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Form data saved and emails sent successfully!"
    assert mailer.sent == ["ops@school.edu"]
    assert sheets.appended[0][1] == "Sheet1!B2"


def test_support_submit_failure(client, mailer):
    mailer.fail = True

    resp = client.post("/submit", json={"first_name": "Asha"})

    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Error saving form data or sending emails"


def test_upload_gallery_and_serving(client):
    resp = client.post(
        "/upload",
        data={"file": (io.BytesIO(b"\x89PNG"), "sports.png")},
        content_type="multipart/form-data",
    )
    assert resp.status_code == 200
    url = resp.get_json()["secure_url"]
    assert url.startswith("/media/uploads/")

    assert client.get("/images").get_json() == [url]
    assert client.get(url).data == b"\x89PNG"


def test_upload_without_file(client):
    resp = client.post("/upload", data={}, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No file uploaded"}


def test_timetables(client, tmp_path):
    (tmp_path / "Exam_Timetables" / "Class2").mkdir(parents=True)
    (tmp_path / "Exam_Timetables" / "Class2" / "finals.pdf").write_bytes(b"%PDF")

    assert client.get("/api/timetables/view/Class2").get_json() == []
    assert client.get("/api/exam-timetables/view/Class2").get_json() == [
        {
            "fileName": "finals.pdf",
            "url": "/media/Exam_Timetables/Class2/finals.pdf",
            "fileId": "Exam_Timetables/Class2/finals.pdf",
        }
    ]


def test_upload_disk_failure_is_500(client, tmp_path):
    (tmp_path / "uploads").write_bytes(b"not a folder")

    resp = client.post(
        "/upload",
        data={"file": (io.BytesIO(b"\x89PNG"), "sports.png")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal Server Error"}


@pytest.mark.parametrize("roll_number, status", [(0, 400), (False, 400), (123, 404), ("   ", 404)])
def test_attendance_roll_number_must_be_exact_text(client, roll_number, status):
    resp = client.post("/attendance/rollNumber", json={"rollNumber": roll_number})

    assert resp.status_code == status

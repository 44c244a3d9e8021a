from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .attendance.service import AttendanceAggregator
from .attendance.sheet_index import SheetRowIndex
from .database.connection import DBConfig, DatabaseConnection
from .media.local_storage import LocalMediaStorage
from .media.model import MediaConfig
from .media.service import MediaService
from .notifications.mailer import SmtpConfig, SmtpMailer
from .posts.service import PostService
from .sheets.google_sheets_client import GoogleSheetsClient
from .sheets.model import SheetsConfig
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService
from .support.service import SupportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    sheets_config: SheetsConfig
    media_config: MediaConfig

    students_repo: MySQLStudentRepository
    sheets_client: GoogleSheetsClient
    media_storage: LocalMediaStorage

    attendance_service: AttendanceAggregator
    student_service: StudentService
    media_service: MediaService
    post_service: PostService
    support_service: SupportService


def build_container(*, settings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(settings.DB_CONFIG))

    sheets_config = SheetsConfig(
        spreadsheet_id=str(settings.SPREADSHEET_ID),
        class_sheets=tuple(settings.CLASS_SHEETS),
        attendance_range=str(settings.ATTENDANCE_RANGE),
    )
    media_config = MediaConfig(
        root_dir=str(Path(settings.UPLOAD_FOLDER).resolve()),
        url_prefix=str(settings.MEDIA_URL_PREFIX),
    )
    smtp_config = SmtpConfig(
        host=str(settings.SMTP_HOST),
        port=int(settings.SMTP_PORT),
        user=str(settings.EMAIL_USER),
        password=str(settings.EMAIL_PASSWORD),
    )

    students_repo = MySQLStudentRepository(conn)
    sheets_client = GoogleSheetsClient.from_settings(
        credentials_json=getattr(settings, "GOOGLE_CREDENTIALS", ""),
        credentials_file=getattr(settings, "GOOGLE_CREDENTIALS_FILE", ""),
    )
    media_storage = LocalMediaStorage(media_config)

    attendance_service = AttendanceAggregator(SheetRowIndex(sheets_client, sheets_config), sheets_config)
    student_service = StudentService(students_repo)
    media_service = MediaService(media_storage)
    post_service = PostService(sheets_client, str(settings.DATA_SHEET_ID))
    support_service = SupportService(sheets_client, str(settings.SUPPORT_SHEET_ID), SmtpMailer(smtp_config))

    return Container(
        conn=conn,
        sheets_config=sheets_config,
        media_config=media_config,
        students_repo=students_repo,
        sheets_client=sheets_client,
        media_storage=media_storage,
        attendance_service=attendance_service,
        student_service=student_service,
        media_service=media_service,
        post_service=post_service,
        support_service=support_service,
    )

"""School portal backend.

Feature modules (attendance, students, media, posts, support) each keep a
model, a repository/gateway protocol, a service and a thin Flask controller.
Attendance is read from Google Sheets class tabs; student records come from
MySQL.
"""

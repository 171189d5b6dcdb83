"""School attendance tracker.

Organized by feature modules (users, students, attendance, daily_status,
reports) with a thin Flask controller layer over service/repository layers.
"""

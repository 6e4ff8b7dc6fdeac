"""Example: use the stores and dashboards directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

from src.smart_qr_check.smart_qr_check.attendance.model import NewSession
from src.smart_qr_check.smart_qr_check.container import build_container


def main():
    container = build_container(seed_fixtures=True)
    attendance = container.attendance_service

    session = attendance.create_session(NewSession(topic="Operating Systems", date="2025-11-06", time="10:00 AM", room="Room 301"))
    print(session.qr_code)
    print(attendance.mark_attendance(session.session_id, "CS2024001", "John Doe"))
    print(attendance.mark_attendance(session.session_id, "CS2024001", "John Doe"))
    print(container.dashboard_service.student("CS2024001").attendance_rate)


if __name__ == "__main__":
    main()

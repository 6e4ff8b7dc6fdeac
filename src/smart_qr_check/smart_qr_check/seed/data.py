"""Demo data loaded at startup when SEED_FIXTURES is enabled."""

SESSIONS = [
    {"id": "1", "topic": "Data Structures", "date": "2025-11-05", "time": "09:00 AM", "room": "Room 101", "duration": "60 min", "qr_code": "QR-DS-001"},
    {"id": "2", "topic": "Algorithms", "date": "2025-11-04", "time": "11:00 AM", "room": "Room 102", "duration": "90 min", "qr_code": "QR-ALG-002"},
    {"id": "3", "topic": "Database Systems", "date": "2025-11-03", "time": "02:00 PM", "room": "Room 201", "duration": "75 min", "qr_code": "QR-DB-003"},
]

ATTENDANCE_RECORDS = [
    ("1", "CS2024001", "John Doe", "2025-11-05 09:05:00"),
    ("1", "CS2024002", "Jane Smith", "2025-11-05 09:07:00"),
    ("1", "CS2024003", "Mike Johnson", "2025-11-05 09:10:00"),
    ("2", "CS2024001", "John Doe", "2025-11-04 11:05:00"),
    ("2", "CS2024004", "Sarah Wilson", "2025-11-04 11:08:00"),
    ("3", "CS2024001", "John Doe", "2025-11-03 14:05:00"),
    ("3", "CS2024002", "Jane Smith", "2025-11-03 14:06:00"),
    ("3", "CS2024005", "David Brown", "2025-11-03 14:12:00"),
]

EVENTS = [
    {"id": "1", "name": "Tech Symposium 2025", "date": "2025-11-15", "venue": "Main Auditorium", "description": "Annual technology conference featuring industry leaders", "qr_code": "QR-TECH-2025"},
    {"id": "2", "name": "Cultural Fest", "date": "2025-11-20", "venue": "Sports Complex", "description": "Celebrate diversity with music, dance, and food", "qr_code": "QR-CULT-2025"},
    {"id": "3", "name": "Hackathon 2025", "date": "2025-11-25", "venue": "Computer Lab Block", "description": "24-hour coding competition with amazing prizes", "qr_code": "QR-HACK-2025"},
    {"id": "4", "name": "Sports Day", "date": "2025-11-30", "venue": "Sports Ground", "description": "Inter-department sports competition", "qr_code": "QR-SPORT-2025"},
]

EVENT_REGISTRATIONS = [
    ("1", "CS2024001", "John Doe", "2025-11-10 10:30:00"),
    ("1", "CS2024002", "Jane Smith", "2025-11-10 11:15:00"),
    ("1", "CS2024003", "Mike Johnson", "2025-11-10 14:20:00"),
    ("1", "CS2024004", "Sarah Wilson", "2025-11-11 09:00:00"),
    ("2", "CS2024001", "John Doe", "2025-11-12 16:00:00"),
    ("2", "CS2024003", "Mike Johnson", "2025-11-12 16:30:00"),
    ("3", "CS2024002", "Jane Smith", "2025-11-13 10:00:00"),
    ("3", "CS2024004", "Sarah Wilson", "2025-11-13 11:00:00"),
    ("4", "CS2024003", "Mike Johnson", "2025-11-14 15:00:00"),
]

EVENT_CHECKINS = [
    ("1", "CS2024001", "John Doe", "2025-11-15 09:05:00"),
    ("1", "CS2024002", "Jane Smith", "2025-11-15 09:12:00"),
    ("2", "CS2024001", "John Doe", "2025-11-20 10:00:00"),
]

# Admin overview is a static snapshot, not read from the live stores.
ADMIN_USERS = [
    {"id": "1", "name": "John Doe", "role": "Student", "status": "Active"},
    {"id": "2", "name": "Jane Smith", "role": "Teacher", "status": "Active"},
    {"id": "3", "name": "Mike Johnson", "role": "Organizer", "status": "Active"},
    {"id": "4", "name": "Sarah Wilson", "role": "Student", "status": "Inactive"},
    {"id": "5", "name": "David Brown", "role": "Teacher", "status": "Active"},
]

ADMIN_SESSIONS = [
    {"id": "1", "topic": "Data Structures", "teacher": "Jane Smith", "date": "2025-11-05", "attendance": 45},
    {"id": "2", "topic": "Algorithms", "teacher": "David Brown", "date": "2025-11-04", "attendance": 42},
    {"id": "3", "topic": "Database Systems", "teacher": "Jane Smith", "date": "2025-11-03", "attendance": 48},
]

ADMIN_EVENTS = [
    {"id": "1", "name": "Tech Symposium 2025", "organizer": "Mike Johnson", "date": "2025-11-15", "participants": 120},
    {"id": "2", "name": "Cultural Fest", "organizer": "Mike Johnson", "date": "2025-11-20", "participants": 95},
]

ADMIN_TREND = [
    {"month": "Jul", "users": 45, "sessions": 12, "events": 2},
    {"month": "Aug", "users": 52, "sessions": 15, "events": 3},
    {"month": "Sep", "users": 68, "sessions": 18, "events": 4},
    {"month": "Oct", "users": 75, "sessions": 20, "events": 3},
    {"month": "Nov", "users": 85, "sessions": 22, "events": 5},
]

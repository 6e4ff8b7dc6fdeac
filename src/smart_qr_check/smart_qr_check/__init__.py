"""Smart QR Check package.

Role-based attendance and event check-in dashboard. The package is organized
by feature modules (attendance, events, dashboards, ...) with a thin Flask
controller layer on top of in-memory repositories and service layers.
"""

"""School attendance backend.

This package is organized by feature modules (users, classes, students,
sessions, attendance, stats ...) with a thin Flask controller layer on top of
service and repository layers.
"""

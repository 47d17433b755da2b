"""Attendance Tracker package.

Organized by feature modules (attendance, users, alerts, reports) over a
pluggable key-value storage layer, with a thin Flask controller layer on top
of plain service classes.
"""

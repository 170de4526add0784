"""Lecture Attendance package.

Organized by feature modules (attendance, students, roster, reporting) with a
thin interactive shell on top of service/repository layers.
"""

"""Classroom Attendance package.

This package is organized by feature modules (students, attendance, analytics)
with a thin Flask controller layer over service/repository layers backed by
in-memory stores seeded from JSON fixtures.
"""

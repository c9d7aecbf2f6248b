"""Timesheet package.

This package is organized by feature modules (attendance, accounting, reports,
closures, vacations) with a thin Flask controller layer and service/repository
layers on top of a pure time-accounting engine.
"""

"""Incidence System package.

HR incidence tracking organized by feature modules (companies, offices,
employees, incidents, periods, movements, users, reports) with a thin Flask
controller layer over service and SQLAlchemy repository layers.
"""

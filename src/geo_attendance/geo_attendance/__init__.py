"""Geofenced attendance package.

Organized by feature modules (users, two_factor, locations, attendance,
notifications) with a thin Flask controller layer over service/repository
layers.
"""

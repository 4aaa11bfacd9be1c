"""Clinic application for the referral service.

This package contains the doctor and patient models, the repository
layer over them, the symptom/speciality rules and the suggestion engine,
plus the views and route registrations exposing them over HTTP.
"""

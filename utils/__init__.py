"""
utils package
-------------

Shared helpers for the timetable engine: configuration constants, logging
setup, time/duration formatting and the tabular timetable renderer.
"""

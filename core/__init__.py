"""
core
----

Timetable model and the components that never search:

- Activity & Timetable:
  The fixed-shape activity record and helpers for copying and comparing timetables.

- TimetableState:
  Session object owning the live timetable, undo/redo history, named templates,
  per-date template overrides and the clock.

- realtime:
  Locks activities whose time window has already elapsed.

- constraints:
  Pure validation of durations, day boundaries, locks and overlaps.
"""

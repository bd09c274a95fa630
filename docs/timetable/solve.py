timetable_solve_description = """
Re-derive a feasible timetable for the day after a disturbance, changing as little as possible.

### Request Body

- `activities` (List): The current timetable. Each activity contains:
    - `name`: Name of the activity
    - `start`: Start time in minutes since midnight
    - `duration`: Length in minutes
    - `minDuration`: Shortest acceptable length in minutes
    - `maxDuration`: Longest acceptable length in minutes
    - `flexible`: Whether the duration may be adjusted
    - `locked`: Whether the activity is pinned and must not change
    - `priority`: Cost multiplier for changing the activity (Optional, default 0)

- `dayStart` / `dayEnd`: Day boundaries in minutes since midnight (Optional, defaults from configuration)

- `now`: Current time in minutes since midnight (Optional). Activities that have ended by then are locked.

- `maxCandidates` / `timeoutSeconds`: Caps on the search (Optional)

### Response

- `status`: One of `solved`, `nothing_to_adjust`, `no_solution`, `search_truncated`
- `score`: Distance of the returned timetable from the input (lower is better), `null` if no candidate was chosen
- `candidateCount`: Number of valid candidate timetables found
- `truncated`: Whether the search stopped early
- `activities`: The resulting timetable
"""

timetable_validate_description = """
Check a timetable against duration bounds, day boundaries and pairwise overlaps.

### Response

- `valid`: True if no violation was found
- `orderValid`: True if activities are sorted by start time
- `violations`: List of `{type, activity, other, message}` where `type` is one of `duration`, `dayBoundary`, `lockedViolation`, `overlap`
"""

timetable_propagate_description = """
Remove overlaps between adjacent activities by shrinking flexible activities first and shifting them second.
Locked activities are never moved.
"""

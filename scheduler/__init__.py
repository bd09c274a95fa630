"""
scheduler
---------

Re-scheduling engine. Exposes:

- `propagation`: Forward and backward overlap removal between adjacent activities.
- `search`: Bounded backtracking over quantized start/duration choices.
- `scoring`: Minimal-change scoring and candidate selection.
- `apply`: Commit step that locks finished activities and notifies the renderer.
- `solver`: The orchestrator that sequences locking, search, selection and commit.
"""
from . import propagation, search, scoring, apply, solver

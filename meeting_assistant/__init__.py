"""Meeting Assistant Package — canned meeting summaries and task checklists over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

"""
Atomic components.

Each component is a functional core with a run() entry point:
- arithmetic: numeric operations
- formatting: text rendering of results
"""

"""Pipeline stages.

Each module exposes pure functions: they take their full input and return a new
output structure, never mutating items or buckets they were given.
"""

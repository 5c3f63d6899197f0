"""Core Layer — pure domain logic: error hierarchy, merge rules, resource contracts.

Invariants:
    - Core never imports from api/, infrastructure/ or models/
    - Everything here is synchronous and free of IO
"""

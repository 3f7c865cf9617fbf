"""Core Layer — pure chart logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Serializers operate on already-loaded objects through the *Like protocols
"""

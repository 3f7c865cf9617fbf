"""Chart content core — asset slots, app/Sonolus serializations, discovery feed.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

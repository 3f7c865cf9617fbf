"""Pydantic Schemas — response envelopes for the Sonolus endpoints.

Invariants:
    - Item payloads are produced by core serializers and passed through as dicts;
      schemas only fix the envelope around them
"""

"""Infrastructure Layer — database, cache, static assets and logging.

Invariants:
    - Infrastructure never imports core domain logic beyond errors and protocols
    - Collaborator failures are mapped to CyanvasError subclasses
"""

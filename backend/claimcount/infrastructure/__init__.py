"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic beyond the error types
    - Driver exceptions are mapped to DatabaseError before leaving this layer
"""

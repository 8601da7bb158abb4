"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services await collaborators (lookup, sources); core/ never does
    - Collaborator failures are re-raised as LookupFailure / SourceUnavailable

Design Decisions:
    - Impure shell around a functional core: IO first, pure composition, IO last
"""

"""Pydantic Schemas — response contracts for the HTTP endpoints.

Invariants:
    - Request bodies reuse core Criteria (one validation path for HTTP and programmatic callers)
"""

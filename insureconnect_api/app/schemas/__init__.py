"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the SQL in the service layer so the API
representation (camelCase timestamps, error bodies) can evolve
independently of the table layout.
"""

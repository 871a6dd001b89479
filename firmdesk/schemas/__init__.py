"""Pydantic request/response schemas (camelCase JSON)."""

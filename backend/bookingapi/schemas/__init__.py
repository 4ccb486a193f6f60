"""Pydantic request/response schemas (the JSON wire contract)."""

"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON shapes accepted and returned by the HTTP
layer and double as the records held in the in‑memory store.
"""

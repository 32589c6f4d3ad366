"""
Pydantic schema definitions for API payloads.

The same ``Product`` model describes a stored row and the JSON returned
to clients; request bodies use the looser ``ProductPayload``.
"""

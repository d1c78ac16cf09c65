"""
Pydantic schema definitions for API payloads.

``product`` holds the product record and the response envelopes of the
products resource; ``error`` documents the error envelope.
"""

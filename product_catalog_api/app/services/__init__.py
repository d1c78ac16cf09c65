"""
Service layer.

The record store, query engine and validation gate live here.  They
take plain Python values and raise the errors from ``core.errors``; the
HTTP layer in ``api`` adapts requests to them.
"""

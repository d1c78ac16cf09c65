"""
Version 1 of the API.

Breaking changes to the products resource belong in a new version
subpackage so existing clients keep working.
"""

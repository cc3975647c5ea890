"""
Repository layer - User persistence on top of the key-value gateway.

Owns key naming and id allocation; hides store primitives from the
HTTP handlers.
"""

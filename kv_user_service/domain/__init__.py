"""
Domain layer - Core business entities and domain errors.

This layer contains the user record and the error taxonomy,
independent of Redis, FastAPI, or any other infrastructure concern.
"""

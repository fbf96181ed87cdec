"""Services Layer — request handlers composing validation, pool access and queries.

Invariants:
    - Handlers raise CatApiError subclasses, never build HTTP responses
"""

"""
Application layer.

Use cases orchestrating domain objects through repository and service protocols.
"""

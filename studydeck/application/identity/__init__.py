"""
Identity bounded context - Application layer.

Registration, authentication, profile management and streak tracking.
"""

"""
Identity bounded context - Domain layer.

Users, their credentials and their daily activity streak.
"""

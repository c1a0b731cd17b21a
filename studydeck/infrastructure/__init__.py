"""
Infrastructure layer.

Adapters to the outside world: SQLAlchemy repositories and mappers, FastAPI
routers and schemas, authentication and the AI content generator.
"""

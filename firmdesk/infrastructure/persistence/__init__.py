"""Persistence: database session, ORM models, repositories, integrity guard."""

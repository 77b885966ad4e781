"""Persistence: SQLAlchemy engine, ORM models, and content repositories."""

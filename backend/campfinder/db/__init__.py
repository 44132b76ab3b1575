"""Database Layer: SQLAlchemy declarative base shared by models and migrations."""

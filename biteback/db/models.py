"""Declarative base for the ORM models"""

from sqlalchemy.orm import declarative_base

# Keep Base for ORM models
Base = declarative_base()

# NOTE: All model classes live in infrastructure/orm/ so the domain layer
# never imports SQLAlchemy. Nothing is imported here to avoid cycles.

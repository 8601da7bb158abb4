"""Database Declarative Base — shared SQLAlchemy metadata for the source mappings."""

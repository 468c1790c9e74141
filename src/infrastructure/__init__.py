"""Infrastructure layer: persistence for the taxonomy.

- **database**: Async PostgreSQL access with SQLAlchemy 2.0, ORM models for
  the four taxonomy tables and the ``SqlTaxonomyStore`` implementation of
  the domain ``TaxonomyStore`` protocol.
"""

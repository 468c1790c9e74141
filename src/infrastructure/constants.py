"""Infrastructure-related constants, particularly for the database."""

POOL_RECYCLE_SECONDS = 3600  # 1 hour

# Constraint names must be deterministic for Alembic autogenerate
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Byte order collation so names sort by codepoint regardless of the
# database default locale
NAME_COLLATION = "C"

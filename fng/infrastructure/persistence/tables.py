"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import Column, DateTime, Float, MetaData, String, Table

metadata = MetaData()

# ============================================================================
# READINGS TABLE (one row per record_id, overwritten on every refresh)
# ============================================================================
readings_table = Table(
    "fng_readings",
    metadata,
    Column("id", String, primary_key=True),
    Column("score", Float, nullable=False),
    Column("timestamp", String, nullable=False),  # Origin string, verbatim
    Column("source", String(16), nullable=False),  # ReadingSource value
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

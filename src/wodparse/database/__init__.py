"""Database layer for the SQL-backed movement dictionary."""

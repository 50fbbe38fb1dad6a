"""
db/ - Database Layer
====================
Connection providers for PostgreSQL (psycopg2) and SQLite.
"""

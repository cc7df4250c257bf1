"""Configuration, database access, security, errors and logging."""

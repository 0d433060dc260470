# utils/__init__.py
"""Pure helpers: secure random draws and strength display metadata."""

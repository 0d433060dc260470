"""
version.py — PASSFORGE
======================
Single source of truth for the version number.
Used by:
  - the command line `--version` flag
  - pyproject.toml (kept in sync by hand)
"""

APP_NAME = "PASSFORGE"
VERSION  = "1.0.0"
BUILD    = "2026.10.19"

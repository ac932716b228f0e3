"""Data models for migration records."""

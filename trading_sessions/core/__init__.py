"""Core constants and exceptions shared by every session component."""

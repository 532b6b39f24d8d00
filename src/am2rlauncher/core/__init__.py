"""Core utilities shared by the launcher components."""

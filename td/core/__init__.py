"""Core todo list logic for td."""

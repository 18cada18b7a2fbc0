"""Shared types, exceptions and contracts for the plug board."""

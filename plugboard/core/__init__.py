"""Core domain and use cases."""

"""Testing utilities for code that depends on modrinth-client."""

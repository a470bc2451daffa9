"""Adapters – infrastructure implementations of the client's ports."""

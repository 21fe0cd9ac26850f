"""Initializr project scaffolding engine."""

"""Dependency injection for IAM bounded context.

Composes infrastructure resources (database sessions, token validation)
with IAM-specific components (repositories, gate, services).
"""

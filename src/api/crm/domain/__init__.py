"""Domain layer for CRM bounded context."""

"""Infrastructure layer for CRM bounded context."""

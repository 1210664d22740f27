"""Application layer for CRM bounded context."""

"""CRM bounded context: tenant-scoped contacts, reachouts and calendar events."""

"""FastAPI dependency providers for CRM bounded context.

Tenant access is checked through the IAM access gate, exposed to CRM only
as a TenantAccessChecker.
"""

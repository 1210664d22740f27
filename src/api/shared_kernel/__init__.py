"""Components every bounded context may depend on.

Holds bearer token validation, the tenant access protocol, the camelCase
API base model and the observation context used by probes. Nothing here
imports a bounded context.
"""

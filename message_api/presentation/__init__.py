"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- Mapping of handler Result variants to HTTP responses
"""

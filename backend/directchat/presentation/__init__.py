"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: bearer-token resolution for routes
- errors.py: domain exception → HTTP response mapping
"""

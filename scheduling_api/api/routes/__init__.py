"""
API route modules for tenant resources.

This package contains subrouters for:
- Clients: list, read, create, replace and delete tenant clients

Routers are included from scheduling_api.api.main (under the /api prefix).
"""

"""
Core application utilities for settings, logging, security and FastAPI dependencies.

This package provides:
- Application-level settings (separate from DB settings)
- Structured logging with correlation/tenant context
- JWT helpers used by the authentication middleware
- The closed set of service error kinds
- Dependency helpers (request context extraction)
"""

"""
Scheduling API: multi-tenant backend for a small-business scheduling/CRM product.
"""

__version__ = "0.1.0"

"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy statements for each domain area. Tenant
isolation is explicit: every tenant-owned repository method takes the tenant id
as its first argument and puts it in the statement's WHERE clause (or, for
inserts, in the written row).
"""

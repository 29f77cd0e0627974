"""
High-level use cases for the provisioning services.

Routers (FastAPI endpoints) call these services instead of manipulating the
database session directly.
"""

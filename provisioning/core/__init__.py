"""
Core utilities shared across the provisioning services.

This package hosts configuration and logging setup. Routers and services depend
on these primitives instead of reading the environment themselves.
"""

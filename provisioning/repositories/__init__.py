"""
Persistence adapters.

Services depend on the repository contract (lookup by mobile number, primary
key, identifier or owner; save; delete) rather than touching the session.
"""

"""Provisioning services for bank accounts, cards and loans keyed by mobile number."""

__version__ = "1.0.0"

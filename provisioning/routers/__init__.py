"""
FastAPI routers grouped by resource kind (accounts, cards, loans).

Each module exposes an APIRouter that the application factory includes when
the matching service is enabled.
"""

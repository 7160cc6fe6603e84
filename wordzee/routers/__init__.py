"""
FastAPI routers grouped by concern (word search/admin, health).

Each module exposes an APIRouter included by the main application (app.py).
"""

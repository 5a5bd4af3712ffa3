"""
FastAPI routers.

``tasks`` holds the CRUD endpoints; ``fallback`` must be included last, it
answers every path nothing else matched.
"""

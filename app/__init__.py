"""
Career Portfolio Tracker
Track internships, skills and certifications in one place.

Architecture:
- MongoDB: users and owner-scoped career records
- FastAPI: REST API under /api, JWT bearer auth
- app.client: Python client, dashboard summary and table state
"""

__version__ = "1.0.0"

"""
Router Services

This module contains services that are specifically used by FastAPI routers.
These services handle business logic for API endpoints.
"""

from .processo_service import ProcessoService

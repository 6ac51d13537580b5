"""
Routes Package
"""

from app.routes.procesar import procesar_bp

__all__ = ['procesar_bp']

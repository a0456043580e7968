"""Utility modules for the LaTeX Lite client"""
from .latex import escape

__all__ = ['escape']

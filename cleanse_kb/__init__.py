"""
Cleanse KB - Parasite Cleanse Protocol Knowledge Base

Read-only protocol catalog, attribute filters and the condition-based
recommender behind the Protocol Wizard.
"""

from .config import API_VERSION

__version__ = API_VERSION

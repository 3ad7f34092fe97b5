"""Backend API access"""
from .api_response import ApiResponse, ApiUser
from .client import ApiClient

__all__ = ['ApiClient', 'ApiResponse', 'ApiUser']

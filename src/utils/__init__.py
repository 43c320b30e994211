"""
Utility modules for the i18n code generator
"""

from .retry import retry_async
from .rate_limiter import RateLimiter

__all__ = ['retry_async', 'RateLimiter']

"""
ptero-admin - Resource Domains

Typed models and accessors for each application API resource.
"""

from . import servers, users

__all__ = ["servers", "users"]

"""
ptero-admin - Shared Utilities

Endpoint constants, path builders and error presentation helpers.
"""

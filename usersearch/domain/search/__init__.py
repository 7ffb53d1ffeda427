"""
Search bounded context: domain layer.

This module contains all domain logic for the user search context:
- Request validation
- Substring filtering with a bounded scan
- Field/direction sorting
- Offset pagination
"""

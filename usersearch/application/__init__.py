"""
Application layer package.

Contains use cases that orchestrate domain logic.
Use cases receive ports through constructor injection.
"""

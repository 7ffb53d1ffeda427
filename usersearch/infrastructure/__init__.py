"""
Infrastructure layer package.

Adapters implementing domain ports: dataset readers and credential stores.
"""

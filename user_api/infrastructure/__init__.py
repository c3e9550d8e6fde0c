"""
Infrastructure Layer
====================

Concrete implementations of domain interfaces (relational storage).
"""

"""
Core Services Module

CRUD services for goods, categories and users, plus the pieces they are
built from: the result type, the partial-update merger and the uniqueness
guard. Import from the submodules directly.
"""


__all__ = []

"""
Core domain models, validation errors and payload contracts.

Independent of the change-making algorithm itself.
"""

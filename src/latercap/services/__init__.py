"""Service layer: quick-capture workflows returning ServiceResult.

Services may import from domain and config.
They must never import from commands or output.
"""

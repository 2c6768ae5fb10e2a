"""Service layer: order operations returning ServiceResult.

Services may import from domain, strategies, and plugins.
They must never import from commands or output.
"""

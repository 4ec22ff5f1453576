"""Service layer — wiring and orchestration returning ServiceResult.

Services may import from domain, config models, and plugins.
They must never import from commands or output.
"""

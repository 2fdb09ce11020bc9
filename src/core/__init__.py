"""Core de namescout: configuración, dominio, contratos y servicios.

No depende de FastAPI ni de la CLI.
"""

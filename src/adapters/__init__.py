"""Adaptadores de infraestructura (HTTP, proveedor IA, lookups)."""

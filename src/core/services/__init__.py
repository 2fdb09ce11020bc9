"""Servicios del Core: extracción de candidatos, scanner acotado y pipeline."""

"""Adaptadores de salida.

Por qué separado del Core:
- La serialización (JSON) es un detalle de presentación, no de dominio.
"""

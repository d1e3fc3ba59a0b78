"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce typer, rich ni la terminal: solo `ParsedArgs` y
  los errores de uso.
"""

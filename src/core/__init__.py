"""Core: configuración, logging, dominio y servicios.

Por qué:
- El Core no importa typer ni escribe en la terminal.
- La CLI y los tests consumen las mismas funciones puras.
"""

"""Servicios puros.

- `arg_parser`: gramática de `example-function` y su contrato de salida.
- `idioms`: secciones de notas que devuelven líneas de texto.
"""

"""Capa CLI (typer + rich).

Por qué un paquete:
- Agrupa comandos y componentes visuales fuera del Core.
- `cli.main` expone la app typer y el script `example-function`.
"""

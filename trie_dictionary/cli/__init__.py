from .cli import CLI, bootstrap, build_parser, main

__all__ = ["CLI", "bootstrap", "build_parser", "main"]

"""HTTP details view: serves the sentences the wwwjdic engine indexed for a headword."""
from .web import app, attach_engine, main

__all__ = ["app", "attach_engine", "main"]

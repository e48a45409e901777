"""
ASGI entry point: `uvicorn mcpolice.main:app`.

Importing this module builds the store backend. Code that only needs the
factory imports it from mcpolice.api.app.
"""

from mcpolice.api.app import create_app

app = create_app()

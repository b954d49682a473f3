"""Convenience runner for the identicon HTTP service.

Use:  python run_server.py
Host and port come from POLKICON_HOST / POLKICON_PORT (or .env).
"""
import uvicorn

from polkicon.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("server:app", host=settings.host, port=settings.port, reload=True)

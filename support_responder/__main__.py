"""
Support Responder - Main Entry Point

Run with ``python -m support_responder``.
"""

from .cli import app

if __name__ == "__main__":
    app()

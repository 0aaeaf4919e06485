# wut/__main__.py
"""
Entry point for wut.
"""
from wut.cli.main import app
from wut import init_application

if __name__ == "__main__":
    init_application()
    app()

"""
Main entry point for the paramprobe CLI

This allows running the CLI with: python -m paramprobe
"""
from .cli import main

if __name__ == "__main__":
    main()

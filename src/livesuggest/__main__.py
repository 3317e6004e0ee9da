"""
Entry point for running livesuggest as a module.

This allows the package to be executed with: python -m livesuggest
"""

from livesuggest.main import run

if __name__ == "__main__":
    run()

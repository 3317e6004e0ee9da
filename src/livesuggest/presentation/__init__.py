"""Presentation layer: Rich rendering and Textual hosts for the controller."""

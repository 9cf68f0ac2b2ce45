"""
templates package

- messages.py: HTML message texts
- buttons.py: inline keyboards and callback data
"""

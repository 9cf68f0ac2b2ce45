"""
handlers package

Contains aiogram routers for different bot functionalities:
- start.py: /start, /help
- search.py: free-text search, lists results as buttons
- buttons.py: result selection, downloads and sends the MP3
"""

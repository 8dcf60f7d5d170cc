"""
services/ - Business Logic
==========================
Orchestrates repositories into the views the application shows.
"""

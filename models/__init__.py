"""
models/ - Domain Objects
========================
Domain dataclasses and their record store schemas.
"""

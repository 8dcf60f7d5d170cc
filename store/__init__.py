"""
store/ - Record Store Access
============================
HTTP client, query builder and response model for the hosted record store.
"""

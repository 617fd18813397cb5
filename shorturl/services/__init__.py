"""
Services module for business logic separation.

This module contains the id generator and the short link service, keeping
business logic separate from API endpoints and database access.
"""

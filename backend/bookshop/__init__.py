"""Bookshop backend: accounts, sessions and orders over JSON HTTP."""

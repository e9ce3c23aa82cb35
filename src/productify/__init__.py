"""Productify customer domain."""

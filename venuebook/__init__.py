"""Venue booking REST API."""

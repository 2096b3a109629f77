"""Hustle Village campus services marketplace API."""

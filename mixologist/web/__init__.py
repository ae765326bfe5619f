"""Mixologist JSON API."""

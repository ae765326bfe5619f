"""Mixologist command line."""

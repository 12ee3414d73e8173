"""Headless data loading and rendering stages of the site widgets."""

"""Tests for the Planting Log integration."""

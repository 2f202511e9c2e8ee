"""Tests for genpair."""

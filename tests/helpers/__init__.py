"""Test helpers for the shredder test suite."""

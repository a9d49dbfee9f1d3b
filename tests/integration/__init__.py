"""Integration tests for the demo site, served in-process or on a live port."""

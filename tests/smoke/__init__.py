"""Smoke checks of the upgrades page over plain HTTP."""

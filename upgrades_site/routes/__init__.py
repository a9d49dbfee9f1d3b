"""
Routes package for the Upgrades Offers demo site.

This package contains route blueprints:
- views: HTML pages (listing, review) and the health endpoint
"""

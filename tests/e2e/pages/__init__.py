"""
Page objects for the upgrades offers suite.

- locators: every selector and test id the suite relies on
- base_page: shared wiring of page, utilities and base URL
- upgrades_offers_page: listing, login modal and bidding flow
"""

"""browser package initializer.

Playwright session ownership, element resolution by text, keyboard focus
traversal and move interactions.
"""

"""Routing — ordered route table with first-match-wins resolution.

Rules are compiled into matchers when they are added, so a bad rule
fails at registration rather than at navigation time.
"""

"""Canned API payloads and test doubles."""

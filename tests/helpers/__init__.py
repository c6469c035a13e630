"""Shared fakes and builders for unit tests."""

"""Shared test data for IndexConsole tests."""

"""Core layer: configuration, logging, exceptions and data models."""

"""Core engine plumbing: logging, settings, session state and services."""

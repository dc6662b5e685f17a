"""Test package with exactly one domain customization."""

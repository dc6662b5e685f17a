"""Test package without a usable domain customization."""

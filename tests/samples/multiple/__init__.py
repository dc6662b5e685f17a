"""Test package with two domain customizations."""

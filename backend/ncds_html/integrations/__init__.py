"""Figma integration: REST client and raw-node simplifier."""

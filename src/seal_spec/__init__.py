"""Pluggable block-seal validation and fork choice rules."""

"""Subspecifications: containers, hashing, consensus engines and fork choice."""

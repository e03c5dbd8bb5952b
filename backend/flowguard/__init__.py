"""Flowguard: validation of approval workflow graphs."""

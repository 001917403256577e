"""Pulsa reseller backend."""

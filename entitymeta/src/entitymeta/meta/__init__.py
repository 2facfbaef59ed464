"""Metadata construction of entitymeta."""

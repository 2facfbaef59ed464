"""Abstract building blocks of entitymeta."""

"""Rate sheet exporter version."""

VERSION = "1.2.0"

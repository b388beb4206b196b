"""Read-only HTTP API over the query layer"""

"""
Digital media catalog.

This package exposes photo and album records kept in MongoDB through a
server-rendered FastAPI front end and an interactive command-line loop,
both sitting on the same service layer.
"""

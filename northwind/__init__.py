"""Northwind data-access service."""

"""Test suite for the Catalog API."""

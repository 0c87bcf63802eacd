"""Expense API: in-memory expense listing and creation over HTTP."""

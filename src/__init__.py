"""Expense dashboard source package."""

"""Payroll API package initializer."""

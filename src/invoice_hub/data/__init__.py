"""
Static and demo data for Invoice Hub.

This package contains fixture data used by the Dash UI for development
and demonstrations without a live invoicing backend.

Modules:
- demo_invoices: Pre-populated Invoice objects with realistic test data
"""

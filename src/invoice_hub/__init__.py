"""
Invoice Hub: invoice documents and AI-drafted invoice text.

This package provides two independent helpers for the Clonmel Glass &
Mirrors invoicing workflow, plus a small Dash UI that uses both.

Subpackages:
- models: Invoice dataclasses and serialization
- pdf: Fixed-template invoice renderer (layout commands + reportlab backend)
- services: Gemini-backed note generation with static fallbacks
- components: Reusable Dash UI components
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Dash application instance (for WSGI deployment)
"""

__all__ = ["__version__"]

__version__ = "0.1.0"

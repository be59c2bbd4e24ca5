"""
Helix Hub API for the Microsoft Teams tab

This package provides the Azure Functions backing the Helix Hub dashboards:
- Office attendance for the previous, current and next week
- Annual leave with approval routing by area of work
- Team data, office presence and enquiry ratings
- UK bank holidays for working-day calculations
"""

__version__ = "1.0.0"

# This project was developed with assistance from AI tools.
"""Model Mortgage calculation engine and public calculator API."""

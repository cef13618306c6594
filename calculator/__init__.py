"""FBA profit calculator package."""

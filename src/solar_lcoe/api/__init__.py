"""HTTP surface, narrative and export helpers for the LCOE calculator."""

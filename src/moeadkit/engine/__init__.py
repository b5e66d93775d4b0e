"""Optimization engine: algorithm components, configuration and the MOEA/D loop."""

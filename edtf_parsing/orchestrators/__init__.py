"""Orchestrators that try grammar productions in a fixed precedence order."""

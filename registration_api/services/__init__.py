# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Business logic and collaborator clients."""

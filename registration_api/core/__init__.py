# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Configuration, logging, database engine and dependency wiring."""

# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""HTTP controllers — one router per endpoint group."""

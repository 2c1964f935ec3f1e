"""
devis - Renovation quote (devis) computation engine

Turns a property description, its rooms (dimensions, openings, custom
surfaces) and the priced work items attached to each room into net
surfaces, VAT-grouped subtotals and the recap tables a quote is built from.

Modules:
    - core: Rounding/formatting primitives, settings, logging, exceptions
    - domain: Pydantic entity models and the surface/financial calculators
    - application: Project state reducer, persistence and recap services
    - ui: Streamlit recap viewer
"""

__version__ = "1.4.0"

"""LOD Authority - Search configuration for linked-data authorities.

Resolves the declarative ``search`` block of a linked-data authority
configuration into a typed, nil-safe view consumed by query building,
result parsing and rendering.

Architecture:
- config/: authority loader, search configuration, results and context maps
- iri_template/: URL template wrapper (parse only, no expansion)
- services/: stateless helpers (language preference resolution)
"""

__version__ = "0.1.0"

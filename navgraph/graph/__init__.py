"""Graph primitives and helpers.

This package provides the `Graph` container (`graph`), the `Vertex` and
`Edge` primitives (`vertex`), and helper modules for NetworkX conversion
(`convert`) and serialization (`io`).
"""

"""merkle-graph: lay out and render Merkle trees as SVG node-link diagrams."""

__version__ = "0.1.0"

"""Mind-map canvas model: geometry, graph, selection, input handling and JSON documents."""

__version__ = "0.1.0"
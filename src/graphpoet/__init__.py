"""graphpoet — word affinity graphs and bridge-word poems."""

__version__ = "0.1.0"

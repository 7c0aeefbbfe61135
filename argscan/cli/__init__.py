"""Command line interface that drives scanner over process arguments and prints expanded ones."""

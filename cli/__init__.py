"""Command line entrypoints for ptreap."""

"""CLI layer — argument parsing, rendering, and error boundary.

This package is the outermost layer of the application and the
composition root: it reads settings, configures logging and installs
the default renderer.  No other layer may import from ``cli``.
"""

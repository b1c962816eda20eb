"""gridfetch command-line application."""

"""Command line front end for converting iTerm2 color presets."""

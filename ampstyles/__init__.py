"""AmpStyles: compile SCSS into site and AMP stylesheets."""

__version__ = "0.1.0"

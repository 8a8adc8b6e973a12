"""datemath command-line interface."""

"""Song catalog command line interface."""

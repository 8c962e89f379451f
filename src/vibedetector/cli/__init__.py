"""vibedetector command-line interface."""

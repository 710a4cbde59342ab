"""jabberid command-line interface."""

"""Entry segmentation, reader configuration and the command-line parser."""

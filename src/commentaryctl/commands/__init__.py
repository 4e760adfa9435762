"""Command handlers wired into the argparse surface."""

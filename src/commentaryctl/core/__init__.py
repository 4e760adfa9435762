"""Shared runtime plumbing: context, errors, exit codes, logging and IO helpers."""

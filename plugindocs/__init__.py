"""Checks for Terraform provider documentation and plain-text Markdown rendering."""

__version__ = "0.1.0"
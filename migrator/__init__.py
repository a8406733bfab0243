"""Migrate legacy JFlex test cases into self-contained Bazel test directories."""

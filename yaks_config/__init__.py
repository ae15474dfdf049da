"""Run configuration for yaks test runs: fixed defaults overlaid with an optional YAML file."""

"""Core building blocks: configuration types, host matrix and commands."""

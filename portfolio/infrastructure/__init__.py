"""Infrastructure: persistence and cache implementations of application ports."""

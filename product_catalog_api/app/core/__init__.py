"""Configuration, logging, storage bootstrap, errors and interfaces."""

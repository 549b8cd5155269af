"""Configuration loading (INI file + typed accessors)."""
